from __future__ import annotations

import logging
import math
import string
import threading

from flask import Flask, jsonify, request

from .color_utils import Argb, argb_from_rgba_hex, hex_from_argb
from .hct import Hct
from .palettes import TonalPalette
from .theme import DEFAULT_SEED_HEX, MaterialContrast, MaterialTheme
from .theme_cache import ThemeCache
from .variant import Variant

# ColorAide
from coloraide import Color as CAColor
from coloraide.spaces.hct import HCT

log = logging.getLogger(__name__)


class C(Color := CAColor):
    pass


# lets seeds be written as color(--hct h c t)
C.register(HCT(), overwrite=True)

FIT_HEX = {"method": "raytrace"}  # consistent gamut-fit for hex output

MODES = {"light": False, "dark": True}


def parse_seed(s: str | None) -> Argb:
    """Any CSS color ColorAide reads, or bare 3/6/8-digit hex; alpha is dropped."""
    raw = (s or "").strip()
    if not raw:
        raise ValueError("seed is required")
    if len(raw) in (3, 6, 8) and all(c in string.hexdigits for c in raw):
        raw = "#" + raw
    color = C(raw).convert("srgb")
    return argb_from_rgba_hex(color.to_string(hex=True, alpha=False, fit=FIT_HEX))


def parse_mode(val: str | None) -> bool:
    m = (val or "light").strip().lower()
    if m not in MODES:
        raise ValueError(f"mode must be one of {sorted(MODES)}")
    return MODES[m]


def parse_float(name: str, val: str | None) -> float:
    if val is None or not val.strip():
        raise ValueError(f"{name} is required")
    x = float(val)
    if not math.isfinite(x):
        raise ValueError(f"{name} must be finite")
    return x


def theme_payload(theme: MaterialTheme) -> dict:
    return {
        "seed": theme.seed_color.to_rgba_hex(),
        "mode": "dark" if theme.is_dark_mode else "light",
        "contrast": theme.contrast.name.lower(),
        "variant": theme.variant.value,
        "colors": theme.to_dict(),
    }


def palette_payload(palette: TonalPalette) -> dict:
    return {
        "hue": palette.hue,
        "chroma": palette.chroma,
        "key_tone": palette.key_color.tone,
        "tones": {str(t): hex_from_argb(argb).lower() for t, argb in palette.tones().items()},
    }


def hct_payload(hct: Hct) -> dict:
    return {
        "hex": hex_from_argb(hct.argb).lower(),
        "hue": hct.hue,
        "chroma": hct.chroma,
        "tone": hct.tone,
    }


# ----------------------------- Flask app ----------------------------------


def create_app(cache: ThemeCache | None = None) -> Flask:
    app = Flask(__name__)
    app.config["THEME_CACHE"] = cache if cache is not None else ThemeCache()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    # the engine's caches are single-threaded; requests take turns
    engine_lock = threading.Lock()

    @app.route("/theme")
    def theme():
        try:
            seed = parse_seed(request.args.get("seed", DEFAULT_SEED_HEX))
            is_dark = parse_mode(request.args.get("mode"))
            variant = Variant.parse(request.args.get("variant"), default=Variant.TONAL_SPOT)
        except ValueError as e:
            return jsonify({"error": f"invalid input: {e}"}), 400
        contrast = MaterialContrast.parse(request.args.get("contrast"))

        try:
            with engine_lock:
                if variant is Variant.TONAL_SPOT:
                    result = app.config["THEME_CACHE"].get(seed, is_dark, contrast)
                else:
                    result = MaterialTheme.create(seed, is_dark, contrast, variant)
        except Exception as exc:
            log.exception("Theme derivation failed")
            return jsonify({"error": str(exc)}), 500

        return jsonify(theme_payload(result))

    @app.route("/palette")
    def palette():
        try:
            seed = parse_seed(request.args.get("seed", DEFAULT_SEED_HEX))
        except ValueError as e:
            return jsonify({"error": f"invalid color: {e}"}), 400

        try:
            with engine_lock:
                result = TonalPalette.from_argb(seed)
        except Exception as exc:
            log.exception("Palette derivation failed")
            return jsonify({"error": str(exc)}), 500

        return jsonify(palette_payload(result))

    @app.route("/hct")
    def hct():
        try:
            hue = parse_float("hue", request.args.get("hue"))
            chroma = parse_float("chroma", request.args.get("chroma"))
            tone = parse_float("tone", request.args.get("tone"))
        except ValueError as e:
            return jsonify({"error": f"invalid input: {e}"}), 400
        if chroma < 0 or not 0 <= tone <= 100:
            return jsonify({"error": "chroma must be >= 0 and tone within [0, 100]"}), 400

        try:
            with engine_lock:
                result = Hct.create(hue, chroma, tone)
        except Exception as exc:
            log.exception("HCT solve failed")
            return jsonify({"error": str(exc)}), 500

        return jsonify(hct_payload(result))

    return app


if __name__ == "__main__":
    create_app().run(debug=False, threaded=True)
