import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True)
class EngineSettings:
    output_dir: str
    port: int
    log_level: str
    gonzalez_max_iterations: int
    gonzalez_epsilon: int
    source_timeout: float
    source_retries: int
    max_upload_bytes: int

    @classmethod
    def from_env(cls) -> "EngineSettings":
        return cls(
            output_dir=os.getenv("GRAYBMP_OUTPUT_DIR", "."),
            port=int(os.getenv("PORT", "5600")),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            gonzalez_max_iterations=int(os.getenv("GONZALEZ_MAX_ITER", "256")),
            gonzalez_epsilon=int(os.getenv("GONZALEZ_EPS", "2")),
            source_timeout=float(os.getenv("SOURCE_TIMEOUT", "10.0")),
            source_retries=int(os.getenv("SOURCE_RETRIES", "2")),
            max_upload_bytes=int(os.getenv("MAX_UPLOAD_BYTES", str(32 * 1024 * 1024))),
        )


SETTINGS = EngineSettings.from_env()


def configure_logging() -> logging.Logger:
    logging.basicConfig(level=SETTINGS.log_level)
    return logging.getLogger("graybmp")
