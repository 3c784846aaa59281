"""
Data generator module: random sample posets driven by the YAML configuration.
"""

import logging
from typing import Dict, Any

from ..poset.base import Poset
from ..poset.metadata import Known
from ..utils.basic_utils import load_config
from ..utils.generation_utils import GenerationUtils

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = 'config/finposet_config.yaml'


def summarize(poset: Poset) -> Dict[str, Any]:
    """Compute the metadata of a poset and collect it in a plain dictionary."""
    poset.find_bot()
    poset.find_top()
    poset.find_minimals()

    def element_or_none(presence):
        return presence.element if isinstance(presence, Known) else None

    return {
        'representation': type(poset).__name__,
        'n': poset.md.n,
        'covers': [list(pair) for pair in poset.covers()],
        'minimals': sorted(poset.minimals()),
        'maximals': sorted(poset.maximals()),
        'bot': element_or_none(poset.bot()),
        'top': element_or_none(poset.top()),
        'linear_extensions': poset.count_linear_extensions(),
    }


def generate_data(config: Dict[str, Any]) -> Dict[str, Any]:
    """Generate a random poset from the ``generation`` section and summarize it."""
    generation = config.get('generation', {})
    n = generation.get('n', 8)
    edge_probability = generation.get('edge_probability', 0.5)
    seed = generation.get('seed')
    representation = generation.get('representation', 'matrix')

    poset = GenerationUtils.generate_random_poset(n, edge_probability, seed, representation)
    data = summarize(poset)
    logger.info("Generated %s with %d elements and %d covers",
                data['representation'], data['n'], len(data['covers']))
    return {'poset': poset, 'summary': data, 'parameters': dict(generation)}


def generate_from_file(config_path: str = DEFAULT_CONFIG_PATH) -> Dict[str, Any]:
    return generate_data(load_config(config_path))
