# Range of the INTEGER columns (PostgreSQL int4)
DB_INT_MIN = -2_147_483_648
DB_INT_MAX = 2_147_483_647


def fits_db_int(value: int) -> bool:
    return DB_INT_MIN <= value <= DB_INT_MAX
