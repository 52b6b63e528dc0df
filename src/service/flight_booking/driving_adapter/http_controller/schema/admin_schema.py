from pydantic import BaseModel, ConfigDict


class AdminStatsResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            'example': {
                'total_flights': 4,
                'total_bookings': 12,
                'total_users': 9,
                'total_revenue': 61200,
            }
        },
    )

    total_flights: int
    total_bookings: int
    total_users: int
    total_revenue: int
