"""
Format Constants
================

Fixed values of the Sponge schematic format and named Minecraft data versions.
"""

# Sponge schematic format version written by this package
SCHEMATIC_VERSION = 2

# Name of the root compound tag
ROOT_NAME = 'Schematic'

AIR_ID = 'minecraft:air'

# Width/Height/Length are unsigned shorts in the format
MAX_DIMENSION = 0xFFFF

MAX_STACK_SIZE = 64

# Item used to fill containers for a comparator reading
SIGNAL_FILLER_ITEM = 'minecraft:redstone_block'

# Slots in a single chest or barrel
CONTAINER_SLOTS = 27

# Minecraft data versions
MC_1_16_5 = 2586
MC_1_17_1 = 2730
MC_1_18_2 = 2975
MC_1_19_4 = 3337
MC_1_20_1 = 3465
MC_1_20_4 = 3700
MC_1_21_1 = 3955

DEFAULT_DATA_VERSION = MC_1_18_2
