from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.flight_booking.app.dto.admin_stats import AdminStats
from src.service.flight_booking.app.interface.i_stats_query_repo import IStatsQueryRepo


class AdminStatsUseCase:
    def __init__(self, *, stats_query_repo: IStatsQueryRepo) -> None:
        self.stats_query_repo = stats_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        stats_query_repo: IStatsQueryRepo = Depends(Provide[Container.stats_query_repo]),
    ) -> Self:
        return cls(stats_query_repo=stats_query_repo)

    @Logger.io
    async def get_stats(self) -> AdminStats:
        return await self.stats_query_repo.get_stats()
