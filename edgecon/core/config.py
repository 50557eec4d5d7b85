import json
import os
from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError
from edgecon.core.errors import ConfigError

# Component holding node 0; exempt from needing a parent.
ROOT_COMPONENT = 0

class ReductionConfig(BaseModel):
    """Configuration for building and solving an EdgeCon reduction."""
    solver_name: str = "cadical153"
    root_component: int = Field(default=ROOT_COMPONENT, ge=0)

    @staticmethod
    def from_env_or_file() -> "ReductionConfig":
        """
        Reads EDGECON_CONFIG_PATH (JSON) when it names an existing file, then
        lets EDGECON_SOLVER override the solver name.
        """
        data = {}

        # 1. Config path
        config_path = os.environ.get("EDGECON_CONFIG_PATH")
        if config_path and os.path.exists(config_path):
            try:
                with open(config_path, "r") as f:
                    data = json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                raise ConfigError(f"Invalid config file {config_path}: {e}") from e
            if not isinstance(data, dict):
                raise ConfigError(f"Invalid config file {config_path}: expected a JSON object")

        # 2. Env var
        env_solver = os.environ.get("EDGECON_SOLVER")
        if env_solver:
            data["solver_name"] = env_solver

        try:
            return ReductionConfig.model_validate(data)
        except PydanticValidationError as e:
            raise ConfigError(f"Invalid configuration: {e}") from e
