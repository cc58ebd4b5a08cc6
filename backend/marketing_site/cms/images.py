# marketing_site/cms/images.py
from __future__ import annotations

import re
from typing import Any, Optional
from urllib.parse import urlencode

from flask import current_app

# image-<assetId>-<width>x<height>-<format>
ASSET_REF = re.compile(r"^image-(?P<id>[A-Za-z0-9]+)-(?P<dims>\d+x\d+)-(?P<fmt>[a-z0-9]+)$")


def _asset_ref(source: Any) -> Optional[str]:
    if not source:
        return None
    if isinstance(source, str):
        return source
    if isinstance(source, dict):
        asset = source.get("asset") or {}
        if isinstance(asset, dict):
            return asset.get("_ref") or asset.get("_id") or asset.get("url")
    return None


def image_url(source: Any, width: Optional[int] = None, height: Optional[int] = None) -> Optional[str]:
    """
    Build a CDN URL for an image field, with optional resize parameters.
    Already-resolved URLs are returned unchanged.
    """
    ref = _asset_ref(source)
    if not ref:
        return None
    if ref.startswith("http://") or ref.startswith("https://"):
        return ref

    match = ASSET_REF.match(ref)
    if not match:
        return None

    config = current_app.config
    url = (
        f"https://cdn.sanity.io/images/{config['SANITY_PROJECT_ID']}/{config['SANITY_DATASET']}/"
        f"{match['id']}-{match['dims']}.{match['fmt']}"
    )

    params = {"auto": "format", "fit": "max"}
    if width:
        params["w"] = int(width)
    if height:
        params["h"] = int(height)
    return f"{url}?{urlencode(params)}"
