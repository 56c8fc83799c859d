""" Keyed message authentication for the signed region of a message: the
    header, parent header, metadata, and content frames, in that order.
"""

from __future__ import annotations

import binascii
import hashlib
import hmac
from typing import Sequence, Union

from . import fields
from .errors import ConfigurationError, InvalidSignature


class SignatureEngine:
    """ Sign and verify the four serialized frames of a message using a
        shared secret *key*. An empty key means the channel is unsigned:
        :func:`sign` produces an empty signature, and :func:`verify`
        accepts anything at all.

        The *digestmod* is any digest accepted by :func:`hmac.new`; the
        wire protocol guarantees support for SHA-256, which is the default.
    """

    def __init__(self, key: Union[bytes, str] = b"", digestmod=hashlib.sha256):

        if isinstance(key, str):
            key = key.encode()

        self.key = bytes(key)
        self.digestmod = digestmod


    @classmethod
    def from_scheme(cls, key: Union[bytes, str], scheme: str = fields.DEFAULT_SIGNATURE_SCHEME) -> "SignatureEngine":
        """ Build a :class:`SignatureEngine` from a connection-file style
            *scheme* string, such as 'hmac-sha256'.
        """

        if not scheme:
            scheme = fields.DEFAULT_SIGNATURE_SCHEME

        algorithm, _, digest = scheme.partition("-")
        if algorithm != "hmac" or not digest:
            raise ConfigurationError(f"unsupported signature scheme: {scheme!r}")

        # Some digests hashlib knows, such as the shake variants, have no
        # fixed size and cannot be used for an HMAC.

        try:
            hashlib.new(digest)
            hmac.new(b"", digestmod=digest).digest()
        except (ValueError, TypeError) as exc:
            raise ConfigurationError(f"unknown digest in signature scheme: {scheme!r}") from exc

        return cls(key, digest)


    @property
    def enabled(self) -> bool:
        return bool(self.key)


    def _mac(self, frames: Sequence[bytes]) -> bytes:

        if len(frames) != len(fields.SIGNED_FIELDS):
            raise ValueError(f"expected {len(fields.SIGNED_FIELDS)} frames to sign, got {len(frames)}")

        mac = hmac.new(self.key, digestmod=self.digestmod)
        for frame in frames:
            mac.update(frame)

        return mac.digest()


    def sign(self, frames: Sequence[bytes]) -> bytes:
        """ Return the lowercase hex signature for the serialized *frames*,
            or an empty signature if signing is disabled.
        """

        if not self.key:
            return b""

        return self._mac(frames).hex().encode()


    def verify(self, signature: bytes, frames: Sequence[bytes]) -> None:
        """ Raise :class:`InvalidSignature` if the hex *signature* does not
            match the serialized *frames*. Nothing is checked if signing is
            disabled, not even the format of the signature.
        """

        if not self.key:
            return

        try:
            supplied = binascii.unhexlify(signature)
        except (binascii.Error, TypeError) as exc:
            raise InvalidSignature("signature is not valid hex") from exc

        # compare_digest is constant-time, and is false for mismatched lengths.

        if not hmac.compare_digest(self._mac(frames), supplied):
            raise InvalidSignature()

# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
