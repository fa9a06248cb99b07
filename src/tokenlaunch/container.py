from dependency_injector import containers, providers

from tokenlaunch.config import Settings
from tokenlaunch.dashboard.service import DashboardService


class Container(containers.DeclarativeContainer):
    settings = providers.Singleton(Settings)

    dashboard_service = providers.Factory(
        DashboardService,
        settings=settings,
    )
