"""
Configuration for the segment-intersection engine.

Contains the sweep-line constants and the detector / queue defaults.
Modules should read values using the get_active_params() function.
"""

# ---------------------------------------------------------------
# SWEEP LINE
# ---------------------------------------------------------------

# y position of a freshly created sweep state
INITIAL_SWEEP_POSITION = 0.0

# distance between the sweep line and the tie-break ("below") line
SWEEP_BELOW_OFFSET = 0.1


# ---------------------------------------------------------------
# DETECTORS
# ---------------------------------------------------------------

DEFAULT_DETECTOR = "brute_force"

# rows of the pair matrix evaluated per numpy block
VECTORIZED_BLOCK_SIZE = 512


# ---------------------------------------------------------------
# EVENT QUEUE
# ---------------------------------------------------------------

# None = size the queue so that no scheduled event is evicted
DEFAULT_QUEUE_CAPACITY = None


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters as one dictionary, so that
    models, detectors and utilities only import a single accessor.
    """

    return {
        "INITIAL_SWEEP_POSITION": INITIAL_SWEEP_POSITION,
        "SWEEP_BELOW_OFFSET": SWEEP_BELOW_OFFSET,
        "DEFAULT_DETECTOR": DEFAULT_DETECTOR,
        "VECTORIZED_BLOCK_SIZE": VECTORIZED_BLOCK_SIZE,
        "DEFAULT_QUEUE_CAPACITY": DEFAULT_QUEUE_CAPACITY,
    }
