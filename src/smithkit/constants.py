"""
Engine constants and default configuration values.

This module contains shared numeric constants and the default value
sets used to build Smith chart grids.
"""

# Reference impedance used when none is given (ohms)
DEFAULT_Z0 = 50.0

# Denominator magnitude below which a bilinear transform is singular
EPSILON = 1e-10

# Speed of light in vacuum (m/s)
SPEED_OF_LIGHT = 299792458.0

# Siemens to millisiemens, used for admittance readouts
ADMITTANCE_DISPLAY_SCALE = 1000.0

# Default grid values (normalized)
DEFAULT_RESISTANCE_VALUES = [0.2, 0.5, 1.0, 2.0, 5.0]
DEFAULT_REACTANCE_VALUES = [-5.0, -2.0, -1.0, -0.5, -0.2, 0.2, 0.5, 1.0, 2.0, 5.0]
DEFAULT_CONDUCTANCE_VALUES = DEFAULT_RESISTANCE_VALUES
DEFAULT_SUSCEPTANCE_VALUES = DEFAULT_REACTANCE_VALUES
DEFAULT_Q_VALUES = [-5.0, -2.0, -1.0, -0.5, 0.5, 1.0, 2.0, 5.0]
DEFAULT_SWR_VALUES = [1.5, 2.0, 3.0, 5.0, 10.0]

# Number of samples used when turning a circle or arc into a polyline
ARC_POINTS = 200
