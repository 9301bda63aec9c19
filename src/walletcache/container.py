from dependency_injector import containers, providers

from walletcache.config import Settings
from walletcache.db.session import build_engine, build_session_factory
from walletcache.storage.local_storage import LocalStorage


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(modules=["walletcache.api.deps"])

    settings = providers.Singleton(Settings)

    engine = providers.Singleton(
        build_engine,
        database_url=settings.provided.database_url,
        echo=settings.provided.debug,
    )

    session_factory = providers.Singleton(
        build_session_factory,
        engine=engine,
    )

    storage = providers.Singleton(
        LocalStorage,
        session_factory=session_factory,
    )
