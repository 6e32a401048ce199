"""Wire the registry, formatter options and interceptors from Settings."""

import logging
from collections.abc import Sequence

from msg_catalog.config import Settings
from msg_catalog.formatters.options import (
    FormatterConfiguration,
    default_formatter_configuration,
    preset,
)
from msg_catalog.interceptors.correlation_id import CorrelationIdInterceptor
from msg_catalog.interceptors.logging_interceptor import LoggingInterceptor
from msg_catalog.interceptors.metadata_enrichment import (
    MetadataEnrichmentFields,
    MetadataEnrichmentInterceptor,
)
from msg_catalog.pipeline import InterceptorPipeline, default_pipeline
from msg_catalog.registry import MessageRegistry, default_registry
from msg_catalog.store_base import StoreBase
from msg_catalog.store_file import FileMessageStore
from msg_catalog.store_sql import SqlMessageStore

logger = logging.getLogger(__name__)


def build_stores(settings: Settings) -> list[StoreBase]:
    """Custom stores in ascending precedence: file, extra files, then the database."""
    stores: list[StoreBase] = []
    if settings.custom_messages_path:
        stores.append(FileMessageStore(settings.custom_messages_path))
    for path in settings.custom_store_paths:
        stores.append(FileMessageStore(path))
    if settings.catalog_dsn is not None:
        stores.append(SqlMessageStore.from_dsn(str(settings.catalog_dsn), table=settings.catalog_table))
    return stores


def parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {name}")
    return level


def configure_from_settings(
    settings: Settings,
    registry: MessageRegistry | None = None,
    pipeline: InterceptorPipeline | None = None,
    formatter_configuration: FormatterConfiguration | None = None,
    extra_stores: Sequence[StoreBase] = (),
) -> MessageRegistry:
    """Apply settings to the given (or process-wide) registry, pipeline and options.

    extra_stores rank above every store the settings name. The pipeline is
    cleared first, so calling this twice does not register the interceptors
    twice.
    """
    registry = registry if registry is not None else default_registry()
    pipeline = pipeline if pipeline is not None else default_pipeline()
    formatter_configuration = (
        formatter_configuration if formatter_configuration is not None else default_formatter_configuration()
    )

    registry.warning_status_code = settings.warning_status_code
    registry.load_timeout = settings.store_load_timeout
    registry.configure(*build_stores(settings), *extra_stores)

    formatter_configuration.set_options(preset(settings.formatter_preset))

    pipeline.clear()
    if settings.auto_add_correlation_id:
        pipeline.register(CorrelationIdInterceptor(generate_missing=settings.generate_correlation_id))
    if settings.auto_enrich_metadata:
        fields = MetadataEnrichmentFields(
            include_request_path=settings.include_request_path,
            include_request_method=settings.include_request_method,
            include_user_agent=settings.include_user_agent,
            include_ip_address=settings.include_ip_address,
            include_user_id=settings.include_user_id,
            include_user_name=settings.include_user_name,
        )
        pipeline.register(MetadataEnrichmentInterceptor(fields=fields))
    if settings.auto_log:
        pipeline.register(LoggingInterceptor(minimum_level=parse_log_level(settings.log_minimum_level)))

    logger.info(
        "%s configured: %d interceptor(s), preset %s",
        settings.app_name,
        len(pipeline),
        settings.formatter_preset,
    )
    return registry
