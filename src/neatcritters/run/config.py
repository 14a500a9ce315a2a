import configparser
import os

from neatcritters.activations import activations
from neatcritters.errors      import ConfigurationError

class Config:

    # Probabilities selecting the structural mutation applied per reproduction.
    PROBABILITY_KEYS = ('node_add_probability',
                        'connection_add_probability',
                        'connection_remove_probability')

    # Standard deviations of the zero-centered normal distributions used for weights.
    DEVIATION_KEYS = ('weight_init_stdev',
                      'new_connection_weight_stdev',
                      'weight_mutation_stdev',
                      'unpaired_weight_mutation_stdev')

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a Config holding the defaults.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config with default values, which
                         can then be adjusted by manual attribute setting.
        """

        # Default config
        if config_file is None:

            # Set defaults for structural mutations
            self.node_add_probability          = 0.2
            self.connection_add_probability    = 0.4
            self.connection_remove_probability = 0.05

            # Set defaults for weight distributions
            self.weight_init_stdev              = 15.0
            self.new_connection_weight_stdev    = 15.0
            self.weight_mutation_stdev          = 0.5
            self.unpaired_weight_mutation_stdev = 15.0

            # Set defaults for the phenotype and traits
            self.activation       = 'logistic'
            self.sight_resolution = 3

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == str:
                    return raw_value.strip()
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise ConfigurationError(f"Missing '{key}' in section [{section}] of '{config_file}'")
            except ValueError as e:
                raise ConfigurationError(f"Invalid value for '{key}' in section [{section}]: {e}") from e

        # [STRUCTURAL_MUTATIONS]

        # The probability that reproduction splits an enabled connection in two,
        # inserting a new hidden node (the split connection gets disabled).
        self.node_add_probability = get_value('STRUCTURAL_MUTATIONS', 'node_add_probability', float)

        # The probability that reproduction adds a connection between two existing
        # nodes (the attempt is dropped if it would duplicate an edge or close a cycle).
        self.connection_add_probability = get_value('STRUCTURAL_MUTATIONS', 'connection_add_probability', float)

        # The probability that reproduction disables a random connection.
        # Connections are never deleted, only disabled.
        self.connection_remove_probability = get_value('STRUCTURAL_MUTATIONS', 'connection_remove_probability', float)

        # [CONNECTION]

        # The standard deviation of the weights of the connections
        # of a newly generated (fully connected) genome.
        self.weight_init_stdev = get_value('CONNECTION', 'weight_init_stdev', float)

        # The standard deviation of the weight of a connection
        # created by the add-connection mutation.
        self.new_connection_weight_stdev = get_value('CONNECTION', 'new_connection_weight_stdev', float)

        # The standard deviation of the perturbation added during crossover
        # to the blended weight of a connection present in both parents.
        self.weight_mutation_stdev = get_value('CONNECTION', 'weight_mutation_stdev', float)

        # The standard deviation of the random partner weight that a connection
        # present in only one parent is blended with during crossover.
        self.unpaired_weight_mutation_stdev = get_value('CONNECTION', 'unpaired_weight_mutation_stdev', float)

        # [NODE]

        # Activation function applied to every connection input and to the outputs.
        # Options: see 'basic_activations.py'. Use "legacy" to reproduce the
        # behaviour of genomes evolved under the original creature simulation.
        self.activation = get_value('NODE', 'activation', str, default='logistic')

        # [TRAITS]

        # The number of sight slots of a creature (each slot feeds four inputs).
        self.sight_resolution = get_value('TRAITS', 'sight_resolution', int, default=3)

    def get(self, name: str) -> float | int | str:
        """
        Keyed lookup of a configuration value.

        Raises:
            ConfigurationError: If no value with this name exists
        """
        try:
            return getattr(self, name)
        except AttributeError:
            raise ConfigurationError(f"Unknown configuration value '{name}'") from None

    def validate(self) -> None:
        """
        Check that all probabilities and deviations are present and within range.

        Raises:
            ConfigurationError: On the first value found missing or out of range
        """
        total = 0.0
        for key in self.PROBABILITY_KEYS:
            value = self._number(key)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"'{key}' must be in [0, 1], got {value}")
            total += value
        if total > 1.0 + 1e-9:
            raise ConfigurationError(f"Structural mutation probabilities must sum to at most 1, got {total}")

        for key in self.DEVIATION_KEYS:
            value = self._number(key)
            if value < 0.0:
                raise ConfigurationError(f"'{key}' must be non-negative, got {value}")

        activation = getattr(self, 'activation', None)
        if activation not in activations:
            raise ConfigurationError(f"Unknown activation function '{activation}'")

        resolution = getattr(self, 'sight_resolution', None)
        if isinstance(resolution, bool) or not isinstance(resolution, int) or resolution <= 0:
            raise ConfigurationError(f"'sight_resolution' must be a positive integer, got {resolution}")

    def _number(self, key: str) -> float:
        value = getattr(self, key, None)
        if value is None:
            raise ConfigurationError(f"Missing configuration value '{key}'")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigurationError(f"'{key}' must be a number, got {value!r}")
        return float(value)
