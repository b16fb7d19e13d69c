import os
import sys
from dotenv import load_dotenv
from dynaconf import Dynaconf, Validator
from hexbytes import HexBytes
from loguru import logger
from pathlib import Path
from typing import Union
from web3 import Web3

from batch_scanner.exceptions import ConfigError

# Scroll rollup contract on Ethereum mainnet
DEFAULT_CONTRACT_ADDRESS = "0xa13baf47339d63b743e7da8741db5456dac1e556"


def hex_to_str(hex_value: HexBytes) -> str:
    # Ensure input is HexBytes type
    if not isinstance(hex_value, HexBytes):
        raise TypeError(f"Expected HexBytes, got {type(hex_value)}")

    # Convert to hex string, maintaining '0x' prefix
    return '0x' + hex_value.hex()

def normalize_address(value: Union[str, int]) -> str:
    """Undo the TOML cast Dynaconf applies to 0x-prefixed values"""
    if isinstance(value, int) and not isinstance(value, bool):
        return "0x" + format(value, "040x")
    return value

def load_config(file_name: str = "config.yml", env_file: Union[str, Path] = ".env") -> Dynaconf:
    """Load and validate scanner configuration

    The RPC provider URL comes from the environment file, everything else from
    the optional settings file (or BATCH_SCANNER_ prefixed environment variables).

    Params:
        file_name (str): Settings file, resolved against the working directory when relative
        env_file (str | Path): Environment file holding RPC_PROVIDER_URL

    Returns:
        Dynaconf: Validated configuration object

    Raises:
        ConfigError: If the environment file or the RPC URL is missing
        dynaconf.ValidationError: If a setting fails validation
    """
    env_path = Path(env_file)
    if not env_path.is_file():
        raise ConfigError(f"Environment file not found: {env_path}")
    load_dotenv(env_path)

    rpc_provider_url = os.getenv("RPC_PROVIDER_URL")
    if not rpc_provider_url:
        raise ConfigError(f"RPC_PROVIDER_URL is not set in {env_path}")

    config_path = Path(file_name)

    settings = Dynaconf(
        settings_files=[str(config_path)],
        envvar_prefix="BATCH_SCANNER",
    )
    settings.set("rpc_provider_url", rpc_provider_url)

    settings.validators.register(
        Validator('contract.address', default=DEFAULT_CONTRACT_ADDRESS,
                 cast=normalize_address, condition=Web3.is_address,
                 messages={"condition": "contract.address must be a valid Ethereum address"}
        ),
        Validator('scan.num_blocks', default=1000, is_type_of=int, gt=0),
        Validator('scan.chunk_size', default=10, is_type_of=int, gt=0),
        Validator('chain.head_block', default="latest", is_in=["latest", "safe", "finalized"]),
        Validator('chain.fork', default="cancun", is_in=["cancun", "prague"]),
        Validator('rpc.timeout', default=30, gt=0),
        Validator('logging.level', default="INFO", is_type_of=str),
        Validator('logging.file', default=None),
        Validator('metrics.enabled', default=False, is_type_of=bool),
        Validator('metrics.port', default=8000, is_type_of=int),
        Validator('metrics.addr', default="0.0.0.0", is_type_of=str),
    )
    # Validate all settings at once
    settings.validators.validate()

    return settings

def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Send logs to stderr at the given level, and optionally to a rotating file"""
    logger.remove()
    logger.add(sys.stderr, level=level.upper())
    if log_file:
        logger.add(log_file, level=level.upper(), rotation="100 MB", retention="10 days")
