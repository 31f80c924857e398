from __future__ import annotations

from dependency_injector import containers, providers

from .config import AppConfig
from ..core.ports import DefaultNameGenerator
from ..core.services import AnalysisOrchestrator
from ..core.usecases.analyze import AnalyzeUseCase
from ..core.usecases.show import ShowUseCase
from ..infra.analyzer import CjlintAnalyzer
from ..infra.logging import AnalysisLogger
from ..infra.manifest import ManifestLocator
from ..infra.result_cache import RedisResultCache
from ..infra.toolchain import Toolchain
from ..infra.working_copy import WorkingCopyManager


class Container(containers.DeclarativeContainer):
    """DI container with Pydantic BaseSettings support."""

    config = providers.Configuration(pydantic_settings=[AppConfig()])

    # Logger (Resource: manages lifecycle with init/shutdown)
    logger = providers.Resource(
        AnalysisLogger,
        logger_name=config.logging.logger_name,
        level=config.logging.level,
        console_output=config.logging.console_output,
        json_console=config.logging.json_console,
        log_file=config.logging.log_file,
    )

    names = providers.Singleton(
        DefaultNameGenerator,
        length=config.workspace.name_length,
    )

    # One extraction per process
    toolchain = providers.Singleton(
        Toolchain,
        home=config.toolchain.home,
        archive=config.toolchain.archive,
        executable=config.toolchain.executable,
    )

    working_copies = providers.Factory(
        WorkingCopyManager,
        root=config.workspace.root,
        names=names,
        logger=logger,
        prefix=config.workspace.dir_prefix,
    )

    manifests = providers.Factory(
        ManifestLocator,
        filename=config.manifest.filename,
    )

    analyzer = providers.Factory(
        CjlintAnalyzer,
        toolchain=toolchain,
        output_dir=config.analyzer.output_dir,
        names=names,
        logger=logger,
        timeout_s=config.analyzer.timeout_s,
    )

    result_cache = providers.Factory(
        RedisResultCache,
        url=config.cache.url,
        namespace=config.cache.namespace,
        socket_timeout=config.cache.socket_timeout,
    )

    analysis_orchestrator = providers.Factory(
        AnalysisOrchestrator,
        working_copies=working_copies,
        manifests=manifests,
        analyzer=analyzer,
        cache=result_cache,
        logger=logger,
    )

    # Use cases
    analyze_uc = providers.Factory(
        AnalyzeUseCase,
        orchestrator=analysis_orchestrator,
    )

    show_uc = providers.Factory(
        ShowUseCase,
        cache=result_cache,
    )
