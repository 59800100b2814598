# Characters that survive a noisy render without being mistaken for others
# (no 0/O, 1/I, 2/Z, 5/S, 8/B).
DEFAULT_ALPHABET = "ACDEFGHJKLMNPQRTUVWXY34679"

DEFAULT_MIN_LENGTH = 10
DEFAULT_MAX_LENGTH = 12
DEFAULT_FONT_SIZE = 40

# Canvas is this much larger than the measured answer when auto-sized
CANVAS_SCALE = 1.2

# Generic sans-serif faces, tried in order before Pillow's bundled font
FONT_CANDIDATES = (
    "DejaVuSans.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
    "/Library/Fonts/Arial.ttf",
    "arial.ttf",
)

BACKGROUND_COLOR = "white"

# One decoy string is drawn per color
DECOY_COLORS = ("yellow", "lightgreen", "greenyellow")

# Two tones of the hatch texture used to fill the real answer
HATCH_BACKGROUND = "ghostwhite"
HATCH_FOREGROUND = "darkblue"

# Noise line colors, all valid Pillow ImageColor names
PALETTE = (
    "aqua", "aquamarine", "blue", "blueviolet", "brown", "burlywood",
    "cadetblue", "chartreuse", "chocolate", "coral", "cornflowerblue",
    "crimson", "darkcyan", "darkgoldenrod", "darkgray", "darkgreen",
    "darkkhaki", "darkmagenta", "darkolivegreen", "darkorange", "darkorchid",
    "darkred", "darksalmon", "darkseagreen", "darkslateblue", "darkturquoise",
    "deeppink", "deepskyblue", "dodgerblue", "firebrick", "forestgreen",
    "fuchsia", "gold", "goldenrod", "gray", "green", "hotpink", "indianred",
    "indigo", "khaki", "lightcoral", "lightsalmon", "lightseagreen",
    "lightskyblue", "lightslategray", "lime", "limegreen", "magenta",
    "maroon", "mediumorchid", "mediumpurple", "mediumseagreen",
    "mediumslateblue", "mediumvioletred", "navy", "olive", "olivedrab",
    "orange", "orangered", "orchid", "palevioletred", "peru", "pink", "plum",
    "purple", "red", "rosybrown", "royalblue", "saddlebrown", "salmon",
    "sandybrown", "seagreen", "sienna", "silver", "skyblue", "slateblue",
    "slategray", "springgreen", "steelblue", "tan", "teal", "thistle",
    "tomato", "turquoise", "violet", "wheat", "yellowgreen",
)
