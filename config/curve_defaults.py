# Output domain shared with the firmware side (10-bit PWM, 256-step index)
PWM_MAX = 1023
TABLE_SIZE = 256

CURVE_DEFAULTS = {
    # Standard perceptual gamma for LEDs
    "gamma": 2.2,

    # Exponential ease, roughly matches a 2.2 gamma in the mid range
    "rate": 4.0,

    # LED hybrid: steep toe below the threshold, normal gamma above
    "threshold": 0.2,
    "gamma_low": 3.0,
    "gamma_high": 2.2,

    # No floor unless the preset asks for one
    "pwm_min": 0,
}

# DALI arc power: levels 1..254, 1000:1 dimming range
DALI_MAX_LEVEL = 254
DALI_RANGE = 1000.0
