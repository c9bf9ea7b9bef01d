"""FastAPI application entry point."""

from fastapi import FastAPI

from .config import AppConfig
from .dependencies import include_routers
from .logging import configure_logging
from .plugins.base import EnumCatalog, ErrorSink, ModuleLoader
from .providers.providers_enum import ImportlibModuleLoader, LoadedEnumCatalog
from .providers.providers_factory import default_providers
from .services.error_sink import LoggingErrorSink
from .services.registry import initialize


def create_app(
    config: AppConfig | None = None,
    *,
    error_sink: ErrorSink | None = None,
    loader: ModuleLoader | None = None,
    enum_catalog: EnumCatalog | None = None,
) -> FastAPI:
    """Build FastAPI instance, initialising the provider registry once."""
    cfg = config or AppConfig.build_default()
    configure_logging(cfg.log_level)

    sink = error_sink or LoggingErrorSink()
    module_loader = loader or ImportlibModuleLoader()
    registry = initialize(
        default_providers(
            error_sink=sink,
            loader=module_loader,
            enum_sort_default=cfg.enum_sort_default,
        )
    )

    app = FastAPI(title=cfg.title)
    include_routers(
        app,
        cfg,
        registry=registry,
        error_sink=sink,
        enum_catalog=enum_catalog or LoadedEnumCatalog(),
    )
    return app


app = create_app()
