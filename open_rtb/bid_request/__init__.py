"""OpenRTB 2.5 bid request entities."""

from open_rtb.bid_request.bid_request import BidRequest
from open_rtb.bid_request.context import App, Content, Producer, Publisher, Site
from open_rtb.bid_request.device import Device, Geo
from open_rtb.bid_request.imp import Imp, Metric
from open_rtb.bid_request.media import Audio, Banner, Format, Native, Video
from open_rtb.bid_request.pmp import Deal, Pmp
from open_rtb.bid_request.source import Regs, Source
from open_rtb.bid_request.user import Data, Segment, User

__all__ = [
    "App",
    "Audio",
    "Banner",
    "BidRequest",
    "Content",
    "Data",
    "Deal",
    "Device",
    "Format",
    "Geo",
    "Imp",
    "Metric",
    "Native",
    "Pmp",
    "Producer",
    "Publisher",
    "Regs",
    "Segment",
    "Site",
    "Source",
    "User",
    "Video",
]
