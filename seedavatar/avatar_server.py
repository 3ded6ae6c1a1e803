"""
SeedAvatar Flask entrypoint
"""

import sys
from flask import Flask
from seedavatar.api.routes import bp as api_bp

def create_app() -> Flask:
    app = Flask(__name__)
    app.register_blueprint(api_bp)
    return app

app = create_app()

def _arg(flag: str, default):
    if flag in sys.argv:
        try:
            return type(default)(sys.argv[sys.argv.index(flag) + 1])
        except (IndexError, ValueError):
            print(f"[SeedAvatar] ignoring bad {flag}, using {default}")
    return default

if __name__ == "__main__":
    host = _arg("--host", "0.0.0.0")
    port = _arg("--port", 5000)
    print(f"[SeedAvatar] running at http://{host}:{port}")
    app.run(host=host, port=port, debug=False)
