"""Device and Geo objects."""

from __future__ import annotations

from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    decimal,
    extension,
    integer,
    ip_address,
    md5,
    nested,
    sha1,
    string,
)
from open_rtb.specification import (
    BitType,
    ConnectionType,
    DeviceType,
    LocationService,
    LocationType,
)


class Geo(Entity):
    """Location of the device or the user's home base."""

    lat = decimal()
    lon = decimal()
    type = choice(LocationType)
    accuracy = integer(doc="Estimated accuracy in meters")
    lastfix = integer(doc="Seconds since the geolocation fix was established")
    ipservice = choice(LocationService)
    country = string(doc="ISO-3166-1-alpha-3")
    region = string()
    regionfips104 = string()
    metro = string()
    city = string()
    zip = string()
    utcoffset = integer()
    ext = extension()


class Device(Entity):
    """The device through which the user is interacting."""

    ua = string(recommended=True)
    geo = nested(Geo, init=True, recommended=True)
    dnt = choice(BitType, recommended=True)
    lmt = choice(BitType, recommended=True)
    ip = ip_address(recommended=True)
    ipv6 = ip_address()
    devicetype = choice(DeviceType)
    make = string()
    model = string()
    os = string()
    osv = string()
    hwv = string()
    h = integer()
    w = integer()
    ppi = integer()
    pxratio = decimal()
    js = choice(BitType)
    geofetch = choice(BitType)
    flashver = string()
    language = string()
    carrier = string()
    mccmnc = string()
    connectiontype = choice(ConnectionType)
    ifa = string()
    didsha1 = sha1()
    didmd5 = md5()
    dpidsha1 = sha1()
    dpidmd5 = md5()
    macsha1 = sha1()
    macmd5 = md5()
    ext = extension()
