import re
from urllib.parse import quote, urlsplit
from flask import Blueprint, request, jsonify, Response, current_app

from seedavatar.kernel.avatar import AvatarParams, generate_avatar, clamp_size, DEFAULT_SIZE, DEFAULT_TEXT
from seedavatar.kernel.palettes import STYLES, DEFAULT_STYLE, normalize_style

bp = Blueprint("api", __name__, url_prefix="/")

AVATAR_PREFIX = "/api/avatar/"
META_PREFIX = "/api/meta/"

VERSION = "1.0.0"
SVG_MIMETYPE = "image/svg+xml"
CACHE_CONTROL = "public, max-age=31536000, immutable"
ERROR_MESSAGE = "Error generating avatar"

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
# characters a URL pathname keeps unescaped
_PATH_SAFE = "/+!$&'()*,;=:@-._~"

# ---------- request parsing ----------
def raw_params(prefix: str, params: str) -> str:
    """
    Path after `prefix` exactly as the client sent it, percent-escapes intact.
    Falls back to re-quoting the decoded params if the server gives no raw URI.
    """
    raw = request.environ.get("RAW_URI") or request.environ.get("REQUEST_URI")
    if raw:
        # WSGI strings carry raw bytes as latin-1; escape them as a URL parser would
        path = quote(urlsplit(raw).path, safe=_PATH_SAFE + "%", encoding="latin-1")
        i = path.find(prefix)
        if i >= 0:
            return path[i + len(prefix):]
    return quote(params or "", safe=_PATH_SAFE)

def text_from_path(params: str) -> str:
    """John/Doe and John+Doe both give "John Doe"; %20 stays as sent."""
    segments = [s for s in (params or "").split("/") if s]
    return " ".join(segments).replace("+", " ") or DEFAULT_TEXT

def parse_size(raw) -> int:
    # leading ASCII integer, like parseInt: "200px" -> 200
    m = _LEADING_INT.match(raw or "")
    size = int(m.group(1)) if m else DEFAULT_SIZE
    return clamp_size(size)

def avatar_inputs(prefix: str, params: str):
    text = text_from_path(raw_params(prefix, params))
    style = normalize_style(request.args.get("style") or DEFAULT_STYLE)
    size = parse_size(request.args.get("size"))
    return text, style, size

# ---------- health / version ----------
@bp.route("/health")
def health():
    return jsonify({"ok": True})

@bp.route("/version")
def version():
    return jsonify({
        "name": "SeedAvatar",
        "version": VERSION,
        "styles": list(STYLES),
        "default_size": DEFAULT_SIZE,
    })

# ---------- avatar ----------
@bp.route("/api/avatar/", strict_slashes=False, defaults={"params": ""})
@bp.route("/api/avatar/<path:params>")
def avatar(params):
    text, style, size = avatar_inputs(AVATAR_PREFIX, params)
    try:
        svg = generate_avatar(text, style, size)
    except Exception:
        current_app.logger.exception("Avatar generation error for %r", text)
        return Response(ERROR_MESSAGE, status=500, mimetype="text/plain")
    resp = Response(svg, mimetype=SVG_MIMETYPE)
    resp.headers["Cache-Control"] = CACHE_CONTROL
    return resp

@bp.route("/api/meta/", strict_slashes=False, defaults={"params": ""})
@bp.route("/api/meta/<path:params>")
def avatar_meta(params):
    text, style, size = avatar_inputs(META_PREFIX, params)
    try:
        meta = AvatarParams.from_text(text, style).describe()
    except Exception as e:
        current_app.logger.exception("Avatar parameter error for %r", text)
        return jsonify({"ok": False, "error": ERROR_MESSAGE, "reason": type(e).__name__}), 500
    meta.update(text=text, size=size)
    return jsonify(meta)
