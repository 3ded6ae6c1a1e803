from types import MappingProxyType

# style -> colour groups, 5 colours each
PALETTES = MappingProxyType({
    "pastel": (
        ("#FFB3BA", "#FFDFBA", "#FFFFBA", "#BAFFC9", "#BAE1FF"),
        ("#FFD1DC", "#FFE4B5", "#E6E6FA", "#F0FFF0", "#F0F8FF"),
        ("#FFEAA7", "#DDA0DD", "#98FB98", "#F5DEB3", "#FFE4E1"),
        ("#FFF0F5", "#F0FFFF", "#F5FFFA", "#FFFACD", "#FFE4E1"),
    ),
    "vibrant": (
        ("#FF6B6B", "#4ECDC4", "#45B7D1", "#96CEB4", "#FFEAA7"),
        ("#6C5CE7", "#A29BFE", "#FD79A8", "#FDCB6E", "#E17055"),
        ("#00B894", "#00CEC9", "#0984E3", "#6C5CE7", "#E84393"),
        ("#FF7675", "#74B9FF", "#00CEC9", "#FDCB6E", "#E84393"),
    ),
    "monochrome": (
        ("#2D3436", "#636E72", "#B2BEC3", "#DDD", "#FFF"),
        ("#000", "#333", "#666", "#999", "#CCC"),
        ("#1A1A1A", "#404040", "#808080", "#B3B3B3", "#E6E6E6"),
        ("#212529", "#495057", "#6C757D", "#ADB5BD", "#DEE2E6"),
    ),
})

DEFAULT_STYLE = "pastel"
STYLES = tuple(PALETTES)

def normalize_style(style) -> str:
    return style if isinstance(style, str) and style in PALETTES else DEFAULT_STYLE
