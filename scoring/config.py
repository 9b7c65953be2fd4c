import logging
from pathlib import Path

from omegaconf import DictConfig, OmegaConf

from scoring.constants import ALPHABET_POLICIES, STRICT

logger = logging.getLogger(__name__)

# Paths
PACKAGE_DIR = Path(__file__).resolve().parent
CONFIG_DIR = PACKAGE_DIR / "configs"
DEFAULT_CONFIG_PATH = CONFIG_DIR / "scoring.yaml"

# Alphabet policy: "strict" rejects foreign characters,
# "permissive" lets them through where they never match or pair
ALPHABET_POLICY = STRICT

# Longest input accepted by the naive scorers (0 disables the guard)
NAIVE_MAX_LENGTH = 0


def load_config(config_path: Path | None = None) -> DictConfig:
    """Load scoring settings, merging a YAML file over the module defaults.

    The result can be passed to any scorer as ``cfg=``.

    Args:
        config_path: YAML file to read. Defaults to the ``configs/scoring.yaml``
                     shipped inside the package.

    Returns:
        DictConfig with ``alphabet_policy`` and ``naive_max_length`` keys.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ValueError: If the merged config holds an unknown policy or a
                    length limit that is not a non-negative integer.
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    cfg = OmegaConf.merge(
        OmegaConf.create(
            {
                "alphabet_policy": ALPHABET_POLICY,
                "naive_max_length": NAIVE_MAX_LENGTH,
            }
        ),
        OmegaConf.load(config_path),
    )
    logger.debug("Loaded scoring config from %s", config_path)

    if cfg.alphabet_policy not in ALPHABET_POLICIES:
        raise ValueError(
            f"alphabet_policy must be one of {ALPHABET_POLICIES}, "
            f"got {cfg.alphabet_policy!r}"
        )
    limit = cfg.naive_max_length
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise ValueError(
            f"naive_max_length must be a non-negative integer, got {limit!r}"
        )

    return cfg
