"""Distribution channel objects: Site, App, Publisher, Content and Producer."""

from __future__ import annotations

from open_rtb.bid_request.user import Data
from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    collection,
    extension,
    nested,
    positive_int,
    string,
    strings,
)
from open_rtb.specification import (
    BitType,
    ContentContext,
    ProductionQuality,
    QagMediaRatings,
)


class Producer(Entity):
    """Producer of the content, when it differs from the publisher."""

    id = string()
    name = string()
    cat = strings()
    domain = string()
    ext = extension()


class Publisher(Entity):
    """Publisher of the site or app."""

    id = string()
    name = string()
    cat = strings()
    domain = string()
    ext = extension()


class Content(Entity):
    """Content in which the impression will appear."""

    id = string()
    episode = positive_int()
    title = string()
    series = string()
    season = string()
    artist = string()
    genre = string()
    album = string()
    isrc = string()
    producer = nested(Producer, init=True)
    url = string()
    cat = strings()
    prodq = choice(ProductionQuality)
    context = choice(ContentContext)
    # OpenRTB <= 2.2 string form; only emitted when context is absent.
    context_22 = string(wire_name="context", fallback=True)
    contentrating = string()
    userrating = string()
    qagmediarating = choice(QagMediaRatings)
    keywords = string()
    livestream = choice(BitType)
    sourcerelationship = choice(BitType)
    len = positive_int()
    language = string()
    embeddable = choice(BitType)
    data = collection(Data)
    ext = extension()


class Site(Entity):
    """Website in which the ad will be shown. Mutually exclusive with App."""

    id = string(recommended=True)
    name = string()
    domain = string()
    cat = strings()
    sectioncat = strings()
    pagecat = strings()
    page = string()
    ref = string()
    search = string()
    mobile = choice(BitType)
    privacypolicy = choice(BitType)
    publisher = nested(Publisher, init=True)
    content = nested(Content, init=True)
    keywords = string()
    ext = extension()


class App(Entity):
    """Non-browser application in which the ad will be shown. Mutually exclusive with Site."""

    id = string(recommended=True)
    name = string()
    bundle = string()
    domain = string()
    storeurl = string()
    cat = strings()
    sectioncat = strings()
    pagecat = strings()
    ver = string()
    privacypolicy = choice(BitType)
    paid = choice(BitType)
    publisher = nested(Publisher, init=True)
    content = nested(Content, init=True)
    keywords = string()
    ext = extension()
