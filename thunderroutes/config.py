import os
from typing import Any, Mapping, Optional

# Settings read from the environment. The Streamlit app may override
# them with values from ``st.secrets``.


def _as_int(val: Optional[str], default: int) -> int:
    if val is None or not val.strip():
        return default
    return int(val)


class Settings:
    def __init__(self) -> None:
        self.NOMINATIM_USER_AGENT: str = os.getenv("THUNDERROUTES_USER_AGENT", "thunderroutes_app")
        self.GEOCODE_TIMEOUT: int = _as_int(os.getenv("THUNDERROUTES_GEOCODE_TIMEOUT"), 10)
        self.LOG_LEVEL: str = os.getenv("THUNDERROUTES_LOG_LEVEL", "INFO")
        self.LOG_FORMAT: str = os.getenv("THUNDERROUTES_LOG_FORMAT", "[%(name)s] %(message)s")

    @property
    def GEOCODE_RETRY_TIMEOUT(self) -> int:
        return self.GEOCODE_TIMEOUT * 2

    def update_from(self, values: Mapping[str, Any]) -> None:
        """Override known settings from a mapping such as ``st.secrets``."""
        if "NOMINATIM_USER_AGENT" in values:
            self.NOMINATIM_USER_AGENT = str(values["NOMINATIM_USER_AGENT"])
        if "GEOCODE_TIMEOUT" in values:
            self.GEOCODE_TIMEOUT = int(values["GEOCODE_TIMEOUT"])
        if "LOG_LEVEL" in values:
            self.LOG_LEVEL = str(values["LOG_LEVEL"])
        if "LOG_FORMAT" in values:
            self.LOG_FORMAT = str(values["LOG_FORMAT"])


settings = Settings()
