# fmt: off

#########################
#      Application      #
#########################

APP_NAME = "dotgraph"

#########################
#       Rendering       #
#########################

# External renderer, invoked as `<RENDERER> -T<format> <path>.<SOURCE_EXT>`.
RENDERER = "dot"
SOURCE_EXT = "dot"

#########################
#        Presets        #
#########################

DIRECTION_DEFAULT = "TB"
ROTATE_DEFAULT = "LR"

BOX_SHAPE = "shape = box"

# fmt: on
