"""YAML configuration.

A configuration file sets the defaults for a transformation run; anything
given on the command line overrides it. Every key is optional::

    transform:
      percentage: 35        # chance (0-100) that an eligible note gets a slide
      meter: duple          # or triple
      variants: [STTM2m, TTSM2m2M]   # empty or [RANDOM] means any variant
      seed: 42              # repeatable runs
      labels: [SAN, RN]     # replaces the built-in eligible label list

    logging:
      level: INFO
"""

import dataclasses
import logging
import os
import typing

import yaml

import slidetransform.constants.labels
import slidetransform.partition
import slidetransform.variants


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "slidetransform.yaml"


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> dict:

	"""
	Load configuration from a YAML file.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return {}

	with open(config_path, 'r') as f:
		return yaml.safe_load(f) or {}


@dataclasses.dataclass
class Settings:

	"""
	Options for one transformation run.
	"""

	percentage: float = 50.0
	meter: slidetransform.partition.Meter = slidetransform.partition.Meter.DUPLE
	variants: typing.List[str] = dataclasses.field(default_factory=list)
	seed: typing.Optional[int] = None
	labels: typing.FrozenSet[str] = slidetransform.constants.labels.ELIGIBLE_LABELS
	log_level: str = "INFO"


	def __post_init__ (self) -> None:

		"""
		Normalise and validate field values.
		"""

		self.percentage = float(self.percentage)

		if not 0.0 <= self.percentage <= 100.0:
			raise ValueError(f"Percentage must be between 0 and 100, got {self.percentage}")

		self.meter = slidetransform.partition.Meter.parse(self.meter)
		self.variants = list(self.variants)
		self.labels = frozenset(self.labels)

		for name in self.variants:
			if name != slidetransform.constants.labels.RANDOM_SELECTION:
				slidetransform.variants.lookup(name)


	@classmethod
	def from_config (cls, config: typing.Mapping[str, typing.Any]) -> "Settings":

		"""Build settings from a loaded configuration dictionary.

		Raises:
			ValueError: If a value is out of range or names an unknown meter.
			UnknownVariant: If ``transform.variants`` names a variant that does not exist.
		"""

		transform = config.get('transform', {}) or {}
		logging_config = config.get('logging', {}) or {}

		kwargs: typing.Dict[str, typing.Any] = {}

		for key in ('percentage', 'meter', 'variants', 'seed', 'labels'):
			if transform.get(key) is not None:
				kwargs[key] = transform[key]

		if logging_config.get('level') is not None:
			kwargs['log_level'] = str(logging_config['level']).upper()

		return cls(**kwargs)
