"""
Parameter specification for heightmap generation.

Each tunable is declared once as (min_val, max_val, default) so callers
can pass loose dictionaries and always get clamped, complete values back.
"""

from typing import Dict, Tuple, Optional


class ParameterSpec:
    """
    Specification for generator parameters with validation and clamping.

    Each parameter has:
    - min_val: Minimum allowed value
    - max_val: Maximum allowed value
    - default: Default value if not specified
    """

    def __init__(self, params: Dict[str, Tuple[float, float, float]]):
        """
        Initialize parameter specification.

        Args:
            params: Dict mapping param_name -> (min_val, max_val, default)
        """
        for name, (min_val, max_val, default) in params.items():
            if not (min_val <= default <= max_val):
                raise ValueError(
                    f"Default for '{name}' ({default}) outside range [{min_val}, {max_val}]"
                )
        self.params = params

    def validate(self, values: Dict[str, float]) -> bool:
        """Check if all parameters are present and in valid ranges."""

        for param_name, (min_val, max_val, _) in self.params.items():
            if param_name not in values:
                return False

            value = values[param_name]
            if not (min_val <= value <= max_val):
                return False

        return True

    def extract_params(self, values: Optional[Dict[str, float]] = None) -> Dict[str, float]:
        """Extract parameters, clamping supplied values and filling defaults."""

        values = values or {}
        result = {}
        for param_name, (min_val, max_val, default) in self.params.items():
            if values.get(param_name) is not None:
                value = float(values[param_name])
                # Clamp to valid range
                value = max(min_val, min(max_val, value))
                result[param_name] = value
            else:
                result[param_name] = default

        return result

    def get_param_ranges(self) -> Dict[str, Tuple[float, float]]:
        """Get parameter ranges (min, max) for each parameter."""
        return {name: (min_val, max_val) for name, (min_val, max_val, _) in self.params.items()}


# roughness: 0 = smooth, 1 = mountainous
# seed_value: height given to the four corners before subdivision
GENERATION_PARAMS = ParameterSpec({
    "roughness": (0.0, 1.0, 0.8),
    "seed_value": (1.0, 1.0e6, 1000.0),
})
