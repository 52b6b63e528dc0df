import attrs


@attrs.frozen
class SessionClaims:
    """Identity carried by a verified session token."""

    account_id: int
    is_admin: bool = False
