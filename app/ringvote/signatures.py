"""
Ring signature stamping for cast votes.

No ring-signature scheme is implemented: PlaceholderRingSigner only
produces a random tag and a random ring size so that a vote receipt has
the expected shape. The values cannot be verified, linked or used to
detect double voting.
"""

import random

from dataclasses import dataclass

RING_SIZE_MIN = 100
RING_SIZE_MAX = 149
HASH_HEX_CHARS = 8


@dataclass(frozen=True)
class RingSignature:
    signature_hash: str
    ring_size: int


class PlaceholderRingSigner(object):
    """
    Stands where a linkable ring signature would be computed.

    Pass a seeded random.Random to get reproducible stamps.
    """

    def __init__(self, rng: random.Random = None) -> None:
        self.rng = rng or random.Random()

    def sign(self, election_id: int, candidate_id: int) -> RingSignature:
        """
        The ballot a real scheme would sign; the placeholder ignores it.
        """
        tag = "%0*x" % (HASH_HEX_CHARS, self.rng.getrandbits(HASH_HEX_CHARS * 4))
        return RingSignature(
            signature_hash=f"0x{tag}...",
            ring_size=self.rng.randint(RING_SIZE_MIN, RING_SIZE_MAX),
        )


default_signer = PlaceholderRingSigner()
