"""Build the connection string for a Mongo configuration."""

from urllib.parse import quote_plus

from .MongoConfig import MongoConfig


def _build_uri(config: MongoConfig) -> str:
    """Build a connection string from configuration.

    Credentials are percent-escaped so passwords containing ``@`` or ``:``
    survive pymongo's URI parser.

    Args:
        config: Validated Mongo configuration

    Returns:
        URI of the form ``<protocol>://<user>:<password>@<host>/<auth_db>[?replicaSet=<replset>]``
    """
    uri = (
        f"{config.protocol.value}://{quote_plus(config.user)}:{quote_plus(config.password)}"
        f"@{config.host}/{config.auth_db}"
    )
    if config.replset:
        uri += f"?replicaSet={config.replset}"
    return uri
