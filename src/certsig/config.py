from pydantic import BaseModel
from dotenv import load_dotenv
import os

load_dotenv()


class CertsigConfig(BaseModel):
    # Only the tool's surface is configurable; the key policy is fixed in code.
    log_level: str = os.getenv("CERTSIG_LOG_LEVEL", "INFO").upper()
    output: str = os.getenv("CERTSIG_OUTPUT", "text").lower()  # text|json


CFG = CertsigConfig()


def load_config() -> CertsigConfig:
    return CFG
