"""NativeAdRequest - top-level object of a Native 1.2 ad request."""

from __future__ import annotations

from open_rtb.core.config import DEFAULT_CONFIG, SerializationConfig
from open_rtb.native_request.assets import Asset, EventTracker
from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    collection,
    extension,
    integer,
    version,
)
from open_rtb.specification import (
    BitType,
    NativeAdUnit,
    NativeContextType,
    NativeLayout,
    NativePlacementType,
)


class NativeAdRequest(Entity, root=True):
    """Native ad request.

    It travels inside ``Imp.native.request`` as a JSON string wrapped in
    a ``native`` envelope:

        native = Native(request=NativeAdRequest(...).get_request(), ver="1.2")
    """

    ver = version(default="1.2")
    context = choice(NativeContextType, extension_band=True, recommended=True)
    plcmttype = choice(NativePlacementType, extension_band=True, recommended=True)
    # Native 1.0 fields, superseded by context/plcmttype.
    layout = choice(NativeLayout, extension_band=True, recommended=True)
    adunit = choice(NativeAdUnit, extension_band=True, recommended=True)
    plcmtcnt = integer(default=1)
    seq = integer(default=0)
    assets = collection(Asset, required=True)
    aurlsupport = choice(BitType, default=0)
    durlsupport = choice(BitType, default=0)
    eventtrackers = collection(EventTracker)
    privacy = choice(BitType, default=0)
    ext = extension()

    def get_request(self, config: SerializationConfig | None = None) -> str:
        """JSON of ``{"native": {...}}``."""
        return (config or DEFAULT_CONFIG).dumps({"native": self.to_dict()})
