from .palettes import PALETTES, DEFAULT_STYLE, normalize_style
from .seed_random import string_hash, seeded_random

DEFAULT_TEXT = "AA"
DEFAULT_SIZE = 80
MIN_SIZE, MAX_SIZE = 16, 512

EYE_WIDTH = 1.5
EYE_HEIGHT = 2

MOUTH_OPEN, MOUTH_CLOSED, MOUTH_OPEN_LOW = 0, 1, 2

# whitespace is part of the output contract: cached avatars must stay byte-identical
SVG_TEMPLATE = """<svg viewBox="0 0 36 36" fill="none" role="img" xmlns="http://www.w3.org/2000/svg" width="{size}" height="{size}">
      <mask id="{mask_id}" maskUnits="userSpaceOnUse" x="0" y="0" width="36" height="36">
        <rect width="36" height="36" rx="72" fill="#FFFFFF"></rect>
      </mask>
      <g mask="url(#{mask_id})">
        <rect width="36" height="36" fill="{color1}"></rect>
        <rect x="0" y="0" width="36" height="36" 
              transform="translate({translate_x} {translate_y}) rotate({rotation} 18 18) scale({scale})" 
              fill="{color2}" rx="36"></rect>
        <g transform="translate({translate_x} {translate_y}) rotate({face_rotation} 18 18)">
          {mouth}
          <rect x="{left_eye_x}" y="{eye_y}" width="{eye_width}" height="{eye_height}" rx="1" stroke="none" fill="#FFFFFF"></rect>
          <rect x="{right_eye_x}" y="{eye_y}" width="{eye_width}" height="{eye_height}" rx="1" stroke="none" fill="#FFFFFF"></rect>
        </g>
      </g>
    </svg>"""

MOUTH_OPEN_PATH = '<path d="M13,{y} a1,0.75 0 0,0 10,0" fill="#FFFFFF"/>'
MOUTH_CLOSED_PATH = '<path d="M15 {y}c2 1 4 1 6 0" stroke="#FFFFFF" fill="none" strokeLinecap="round"/>'


def js_number(value) -> str:
    """Print a number the way a JS template literal does (1.0 -> "1")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def clamp_size(size) -> int:
    return min(max(int(size), MIN_SIZE), MAX_SIZE)


class AvatarParams:
    """
    Every visual attribute of an avatar, each drawn from digest + k (k = 0..12).
    """
    def __init__(self, digest: int, style: str = DEFAULT_STYLE):
        self.digest = digest
        self.style = normalize_style(style)
        groups = PALETTES[self.style]
        palette = groups[seeded_random(digest, len(groups))]
        self.palette = palette
        self.color1 = palette[seeded_random(digest + 1, len(palette))]
        self.color2 = palette[seeded_random(digest + 2, len(palette))]

        self.rotation = seeded_random(digest + 3, 360)
        self.translate_x = seeded_random(digest + 4, 10) - 5
        self.translate_y = seeded_random(digest + 5, 10) - 5
        self.scale = 0.9 + seeded_random(digest + 6, 20) / 100
        self.face_rotation = seeded_random(digest + 7, 20) - 10

        self.left_eye_x = 12 + seeded_random(digest + 8, 4)
        self.right_eye_x = 20 + seeded_random(digest + 9, 4)
        self.eye_y = 14 + seeded_random(digest + 10, 2)

        self.mouth_type = seeded_random(digest + 11, 3)
        self.mouth_y = 19 + seeded_random(digest + 12, 2)

    @classmethod
    def from_text(cls, text: str, style: str = DEFAULT_STYLE) -> "AvatarParams":
        return cls(string_hash(text or DEFAULT_TEXT), style)

    @property
    def mask_id(self) -> str:
        return f"mask-{self.digest}"

    def mouth_path(self) -> str:
        if self.mouth_type == MOUTH_OPEN:
            return MOUTH_OPEN_PATH.format(y=self.mouth_y)
        if self.mouth_type == MOUTH_CLOSED:
            return MOUTH_CLOSED_PATH.format(y=self.mouth_y)
        return MOUTH_OPEN_PATH.format(y=self.mouth_y + 1)

    def describe(self) -> dict:
        return {
            "digest": self.digest,
            "style": self.style,
            "mask_id": self.mask_id,
            "colors": [self.color1, self.color2],
            "rotation": self.rotation,
            "translate": [self.translate_x, self.translate_y],
            "scale": self.scale,
            "face_rotation": self.face_rotation,
            "eyes": {"left_x": self.left_eye_x, "right_x": self.right_eye_x, "y": self.eye_y,
                     "width": EYE_WIDTH, "height": EYE_HEIGHT},
            "mouth": {"type": self.mouth_type, "y": self.mouth_y},
        }

    def render(self, size: int = DEFAULT_SIZE) -> str:
        fields = dict(
            size=clamp_size(size),
            mask_id=self.mask_id,
            color1=self.color1,
            color2=self.color2,
            translate_x=self.translate_x,
            translate_y=self.translate_y,
            rotation=self.rotation,
            scale=self.scale,
            face_rotation=self.face_rotation,
            mouth=self.mouth_path(),
            left_eye_x=self.left_eye_x,
            right_eye_x=self.right_eye_x,
            eye_y=self.eye_y,
            eye_width=EYE_WIDTH,
            eye_height=EYE_HEIGHT,
        )
        return SVG_TEMPLATE.format(**{k: js_number(v) if isinstance(v, (int, float)) else v
                                      for k, v in fields.items()})


def generate_avatar(text: str, style: str = DEFAULT_STYLE, size: int = DEFAULT_SIZE) -> str:
    """
    Pure (text, style, size) -> SVG markup. Unknown styles fall back to pastel,
    size is clamped into [16, 512] and empty text stands in as "AA".
    """
    return AvatarParams.from_text(text, style).render(size)
