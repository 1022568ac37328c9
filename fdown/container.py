"""
Dependency Injection Container module.

Contains the Container class wiring the transport, Feedly client, image
store and pipeline from an explicitly supplied AppConfig.
"""

from dependency_injector import containers, providers

from fdown.core.config import AppConfig
from fdown.infrastructure.feed import FeedlyClient
from fdown.infrastructure.http import RequestsTransport
from fdown.infrastructure.storage import DropboxUploader
from fdown.services.entry_pipeline import EntryPipeline
from fdown.services.file import LocalImageStore

STORAGE_LOCAL = 'local'
STORAGE_DROPBOX = 'dropbox'


class Container(containers.DeclarativeContainer):
    """
    Dependency injection container.

    Hierarchy:
    1. Configuration (supplied at startup)
    2. Transport
    3. Feed client and image stores
    4. Pipeline
    """

    # ===== Configuration =====
    app_config = providers.Dependency(instance_of=AppConfig)
    storage_backend = providers.Object(STORAGE_LOCAL)

    # ===== Transport =====
    transport = providers.Singleton(
        RequestsTransport,
        timeout=app_config.provided.timeout
    )

    # ===== External Adapters =====
    feed_client = providers.Singleton(
        FeedlyClient,
        userid=app_config.provided.userid,
        token=app_config.provided.token,
        transport=transport,
        base_url=app_config.provided.base_url
    )

    local_store = providers.Singleton(
        LocalImageStore,
        target_dir=app_config.provided.target_dir
    )

    dropbox_store = providers.Singleton(
        DropboxUploader,
        token=app_config.provided.dropbox_token,
        folder=app_config.provided.dropbox_folder,
        timeout=app_config.provided.timeout
    )

    image_store = providers.Selector(
        storage_backend,
        local=local_store,
        dropbox=dropbox_store
    )

    # ===== Orchestrator =====
    entry_pipeline = providers.Factory(
        EntryPipeline,
        feed_client=feed_client,
        transport=transport,
        image_store=image_store
    )


def create_container(app_config: AppConfig, use_dropbox: bool = False) -> Container:
    """
    Create a container bound to a configuration.

    Args:
        app_config: Loaded configuration.
        use_dropbox: Store images in Dropbox instead of the local directory.

    Raises:
        MissingConfigValueError: If Dropbox is requested without a token.
    """
    container = Container()
    container.app_config.override(providers.Object(app_config))
    if use_dropbox:
        app_config.require_dropbox_token()
        container.storage_backend.override(providers.Object(STORAGE_DROPBOX))
    return container
