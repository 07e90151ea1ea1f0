from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Which revisited containers collapse to null: "shared" matches the
    # historical digests, "path" only breaks true cycles.
    cycle_scope: Literal["shared", "path"] = Field(default="shared", alias="CANONHASH_CYCLE_SCOPE")

    # Payment fingerprints
    default_currency: str = Field(default="UAH", alias="CANONHASH_DEFAULT_CURRENCY")
    default_purpose: Literal["ADVANCE", "REPAIR", "INSURANCE"] = Field(
        default="REPAIR", alias="CANONHASH_DEFAULT_PURPOSE"
    )


settings = Settings()
