"""Engine settings with environment overrides."""

import os
from typing import Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from divider.topology import INDEX_CAPS, NETWORK_SIZES


class EngineSettings(BaseModel):
    """Search limits: result count, per-size catalog caps and enabled sizes."""
    max_results: int = Field(10, ge=1, description="Number of ranked solutions returned")
    size3_index_cap: int = Field(INDEX_CAPS[3], ge=1, description="Catalog entries drawn from for 3-resistor networks")
    size4_index_cap: int = Field(INDEX_CAPS[4], ge=1, description="Catalog entries drawn from for 4-resistor networks")
    network_sizes: Tuple[int, ...] = Field(NETWORK_SIZES, description="Network sizes to search")

    model_config = {'frozen': True}

    @field_validator('network_sizes')
    @classmethod
    def _check_sizes(cls, sizes):
        unknown = [s for s in sizes if s not in NETWORK_SIZES]
        if unknown:
            raise ValueError(f"Unsupported network sizes {unknown}. Available: {list(NETWORK_SIZES)}")
        return tuple(sorted(set(sizes)))

    def index_cap(self, size: int):
        """Index cap for a network size (None = whole catalog)."""
        if size == 3:
            return self.size3_index_cap
        if size == 4:
            return self.size4_index_cap
        return INDEX_CAPS[size]

    @classmethod
    def from_env(cls) -> 'EngineSettings':
        """Build settings from DIVIDER_* environment variables (and a .env file)."""
        load_dotenv()
        overrides = {}
        for key, env in (
            ('max_results', 'DIVIDER_MAX_RESULTS'),
            ('size3_index_cap', 'DIVIDER_SIZE3_INDEX_CAP'),
            ('size4_index_cap', 'DIVIDER_SIZE4_INDEX_CAP'),
        ):
            value = os.getenv(env)
            if value:
                overrides[key] = int(value)
        sizes = os.getenv("DIVIDER_NETWORK_SIZES")
        if sizes:
            overrides['network_sizes'] = tuple(int(s) for s in sizes.split(',') if s.strip())
        return cls(**overrides)
