# config.py
"""
Configuration settings for the ray tracer
"""

# Shading constants
GAMMA = 2.2
MAX_RECURSION_DEPTH = 10
SHADOW_BIAS = 1e-9

# Plane hits whose denominator is at or below this are treated as parallel/facing away
PLANE_PARALLEL_EPSILON = 1e-6

# Rendering settings
RENDER_SETTINGS = {
    'width': 800,
    'height': 600,
    'output': 'render.png',
}

# Camera settings (vup points along -Y so that image row 0 is the top of the frame)
CAMERA_SETTINGS = {
    'look_from': (0.0, 0.0, 0.0),
    'look_at': (0.0, 0.0, -1.0),
    'vup': (0.0, -1.0, 0.0),
    'vfov': 90.0,
}

# Logging settings
LOG_LEVEL = 'INFO'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
