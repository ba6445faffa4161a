"""MaxMind integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class MaxMindSettings(IntegrationSettings):
    """MaxMind DB discovery configuration.

    The database is looked up relative to the install root, first as
    ``MAXMIND_DB_FILENAME`` and then as ``MAXMIND_FALLBACK_DB_PATH``.

    Environment Variables:
        MAXMIND_INSTALL_ROOT: Directory the host runtime is installed in
        MAXMIND_DB_FILENAME: Primary database location, relative to the root
        MAXMIND_FALLBACK_DB_PATH: Fallback database location, relative to the root
        MAXMIND_DOWNLOAD_URL: Where operators can obtain the database

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        root = settings.maxmind.MAXMIND_INSTALL_ROOT
        ```
    """

    MAXMIND_INSTALL_ROOT: str = Field(default=".", alias="MAXMIND_INSTALL_ROOT")
    MAXMIND_DB_FILENAME: str = Field(
        default="maxminddb.mmdb", alias="MAXMIND_DB_FILENAME"
    )
    MAXMIND_FALLBACK_DB_PATH: str = Field(
        default="data/maxminddb.dat", alias="MAXMIND_FALLBACK_DB_PATH"
    )
    MAXMIND_DOWNLOAD_URL: str = Field(
        default="https://maxmind.com", alias="MAXMIND_DOWNLOAD_URL"
    )
