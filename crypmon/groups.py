#!/usr/bin/env python3

"""Pairing context over the BLS12-381 curve (asymmetric pairing), backed by petrelic.
"""

import hashlib
from enum import IntEnum
from petrelic.multiplicative.pairing import G1,G2,GT,G1Element,G2Element
from petrelic.bn import Bn

class Group(IntEnum):
    """Source group selector for the PRF (only G1 and G2 are valid targets)."""
    G1 = 1
    G2 = 2

class PairingGroup:
    """Handle to the bilinear group `e: G1 x G2 -> GT`.

    Every object that needs group arithmetic keeps a reference to one of these
    instead of reaching for the petrelic groups directly.

    Dependencies
    ------------
    * petrelic
    * hashlib.sha256 (identifier hashing)
    """

    _groups = {Group.G1: G1, Group.G2: G2}
    _elements = {Group.G1: G1Element, Group.G2: G2Element}

    def order(self):
        """Order of G1, G2 and GT (a prime, as a Bn)."""
        return G1.order()

    def random_scalar(self):
        """Uniformly random element of ZR."""
        return self.order().random()

    def one(self):
        """Multiplicative identity of ZR."""
        return Bn(1)

    def mul_scalar(self, a, b):
        """Product of two scalars modulo the group order."""
        return a.mod_mul(b, self.order())

    def random(self, group):
        """Random generator of G1 or G2."""
        g = self._groups[group]
        x = self.random_scalar()
        while x == 0:
            x = self.random_scalar()
        return g.generator() ** x

    def exp(self, group, base, e):
        """`base ** e`, where `base` must be an element of `group`."""
        if not isinstance(base, self._elements[group]):
            raise TypeError("expected an element of {}, got {}".format(group.name, type(base).__name__))
        return base ** e

    def identity(self, group=None):
        """Neutral element of G1/G2, or of GT when `group` is None."""
        if group is None:
            return GT.neutral_element()
        return self._groups[group].neutral_element()

    def hash_to_g1(self, identifier):
        """Deterministically map a string to a point in G1 (SHA-256, then hash-to-curve)."""
        digest = hashlib.sha256(identifier.encode("utf-8")).digest()
        return G1.hash_to_point(digest)

    def pair(self, a, b):
        """Pairing `e(a, b)` of `a` in G1 and `b` in G2."""
        return a.pair(b)

    def pair_prod(self, g1_elems, g2_elems):
        """Product of pairings `prod_i e(g1_elems[i], g2_elems[i])` (1 in GT if empty)."""
        result = self.identity()
        for a,b in zip(g1_elems, g2_elems):
            result = result * a.pair(b)
        return result

    def serialize(self, elem):
        """Binary encoding of a group element."""
        return elem.to_binary()
