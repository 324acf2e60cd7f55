"""
ovpnauth demo command line.

Decodes dynamic challenges and builds challenge-response passwords:

    ovpnauth-demo challenge 'CRV1:R,E:abc123:dXNlcg==:Enter your token'
    ovpnauth-demo static <password> <response>
    ovpnauth-demo dynamic <state_id> <response>
"""

import argparse
import sys
from typing import List, Optional

from ovpnauth.auth.challenge import ChallengeResponseCodec
from ovpnauth.auth.errors import DynamicChallengeFormatError
from ovpnauth.core.config import Config, configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ovpnauth-demo",
        description="Challenge/response cookie helper",
    )
    parser.add_argument("--strict-flags", action="store_true",
                        help="reject unknown dynamic challenge flags")
    sub = parser.add_subparsers(dest="command", required=True)

    challenge = sub.add_parser("challenge", help="decode a CRV1 dynamic challenge")
    challenge.add_argument("cookie")

    static = sub.add_parser("static", help="build an SCRV1 static challenge reply")
    static.add_argument("password")
    static.add_argument("response")

    dynamic = sub.add_parser("dynamic", help="build a CRV1 dynamic challenge reply")
    dynamic.add_argument("state_id")
    dynamic.add_argument("response")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = Config.from_env()
    configure_logging(config)
    codec = ChallengeResponseCodec(config, strict_flags=args.strict_flags or None)

    if args.command == "challenge":
        if not codec.is_dynamic(args.cookie):
            print("✗ Not a dynamic challenge", file=sys.stderr)
            return 1
        try:
            cookie = codec.parse(args.cookie)
        except DynamicChallengeFormatError as e:
            print(f"✗ {e}", file=sys.stderr)
            return 1
        print(f"State ID:          {cookie.state_id}")
        print(f"Username:          {cookie.username}")
        print(f"Challenge:         {cookie.challenge_text}")
        print(f"Echo:              {cookie.echo}")
        print(f"Response required: {cookie.response_required}")
    elif args.command == "static":
        print(codec.construct_static_password(args.password, args.response))
    elif args.command == "dynamic":
        print(codec.construct_dynamic_password(args.state_id, args.response))
    return 0


if __name__ == "__main__":
    sys.exit(main())
