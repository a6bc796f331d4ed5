from pydantic_settings import BaseSettings, SettingsConfigDict


class CodecSettings(BaseSettings):
    """Configuration for the message codecs.

    Settings can be provided via environment variables with THREADWIRE_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="THREADWIRE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Wire format used by MessageCodec.encode when none is given
    default_format: str = "aui/v0"

    # Check metadata against the wire schema on encode
    validate_metadata: bool = True

    # Log a warning when a tool-call result is not plain JSON
    warn_on_non_json_result: bool = True
