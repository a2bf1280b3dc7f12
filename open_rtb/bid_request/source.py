"""Source and Regs objects."""

from __future__ import annotations

from open_rtb.schema.entity import Entity
from open_rtb.schema.fields import choice, extension, string
from open_rtb.specification import BitType


class Source(Entity):
    """Nature and behavior of the entity upstream from the exchange.

    Defines post-auction or upstream decisioning when the exchange itself
    does not make the final decision (header bidding, mediation, another
    exchange).
    """

    fd = choice(BitType, recommended=True, doc="Final sale decision: 0 = exchange, 1 = upstream")
    tid = string(recommended=True, doc="Transaction ID common across all participants")
    pchain = string(recommended=True, doc="TAG Payment ID chain")
    ext = extension()


class Regs(Entity):
    """Industry, legal or governmental regulations in force for the request."""

    coppa = choice(BitType, doc="Subject to COPPA regulations")
    ext = extension()
