"""
Command-line front end for the digest, HMAC and OTP primitives.

Examples:
    authcode digest abc
    authcode hmac --key Jefe "what do ya want for nothing?"
    authcode hotp --key 12345678901234567890 --counter 0
    authcode totp --key JBSWY3DPEHPK3PXP --base32 --digits 8
"""
import argparse
import logging
from typing import List, Optional

from . import config
from .digest import sha1_hex
from .hotp import HOTP
from .mac import hmac_sha1_hex
from .totp import TOTP

logger = logging.getLogger(__name__)


def _make_handler(cls, args: argparse.Namespace, **kwargs):
    if args.base32:
        return cls.from_base32(args.key, digits=args.digits, **kwargs)
    return cls(args.key, digits=args.digits, **kwargs)


def cmd_help(args: argparse.Namespace) -> None:
    print("No command specified. Use -h for help.")


def cmd_digest(args: argparse.Namespace) -> None:
    print(sha1_hex(args.text))


def cmd_hmac(args: argparse.Namespace) -> None:
    print(hmac_sha1_hex(args.key, args.text))


def cmd_hotp(args: argparse.Namespace) -> None:
    hotp = _make_handler(HOTP, args)
    print(hotp.at(args.counter))


def cmd_totp(args: argparse.Namespace) -> None:
    totp = _make_handler(TOTP, args, interval=args.period)
    if args.time is None:
        print(totp.now())
    else:
        print(totp.at(args.time))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="authcode", description="SHA-1 digests, HMAC-SHA1 and one-time codes.")
    p.add_argument("--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd")
    p.set_defaults(func=cmd_help)

    # digest
    pd = sub.add_parser("digest", help="Print the SHA-1 hex digest of TEXT")
    pd.add_argument("text")
    pd.set_defaults(func=cmd_digest)

    # hmac
    pm = sub.add_parser("hmac", help="Print the HMAC-SHA1 of TEXT under KEY")
    pm.add_argument("--key", required=True)
    pm.add_argument("text")
    pm.set_defaults(func=cmd_hmac)

    # hotp
    ph = sub.add_parser("hotp", help="Generate the code for a specific counter")
    ph.add_argument("--key", required=True, help="Secret key (raw text unless --base32)")
    ph.add_argument("--base32", action="store_true", help="Treat --key as a Base32 secret")
    ph.add_argument("--counter", type=int, required=True)
    ph.add_argument("--digits", type=int, default=config.DEFAULT_DIGITS, help="Number of OTP digits")
    ph.set_defaults(func=cmd_hotp)

    # totp
    pt = sub.add_parser("totp", help="Generate the code for a point in time")
    pt.add_argument("--key", required=True, help="Secret key (raw text unless --base32)")
    pt.add_argument("--base32", action="store_true", help="Treat --key as a Base32 secret")
    pt.add_argument("--time", type=int, help="Unix timestamp (defaults to now)")
    pt.add_argument("--digits", type=int, default=config.DEFAULT_DIGITS, help="Number of OTP digits")
    pt.add_argument("--period", type=int, default=config.DEFAULT_INTERVAL, help="Time step (seconds)")
    pt.set_defaults(func=cmd_totp)

    return p


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="[%(levelname)s] %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except ValueError as e:
        logger.debug("command %s failed", args.cmd, exc_info=True)
        parser.error(str(e))


if __name__ == "__main__":
    main()
