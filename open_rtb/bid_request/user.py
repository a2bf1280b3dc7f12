"""User, Data and Segment objects."""

from __future__ import annotations

from open_rtb.bid_request.device import Geo
from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import (
    choice,
    collection,
    extension,
    integer,
    nested,
    string,
)
from open_rtb.specification import Gender


class Segment(Entity):
    """A data point about the user from a Data provider."""

    id = string()
    name = string()
    value = string()
    ext = extension()


class Data(Entity):
    """Additional user or content data from a named provider."""

    id = string()
    name = string()
    segment = collection(Segment)
    ext = extension()


class User(Entity):
    """The human user of the device; the advertising audience."""

    id = string(recommended=True)
    buyerid = string(recommended=True)
    yob = integer(doc="Year of birth as a 4-digit integer")
    gender = choice(Gender)
    keywords = string()
    customdata = string()
    geo = nested(Geo, init=True)
    data = collection(Data)
    ext = extension()
