"""
Basic ovpnauth usage example.

This example demonstrates:
- Resolving a tokenized profile into a ClientProfile
- Answering a dynamic challenge
- Building a static challenge reply
"""

from ovpnauth import (
    ChallengeResponseCodec,
    Config,
    DynamicChallengeFormatError,
    OptionList,
    resolve,
)


def profile_example():
    """Resolve an Access Server style profile"""
    print("Profile resolution")
    print("=" * 30)

    options = OptionList.from_directives([
        ["client"],
        ["remote", "vpn.example.com", "443", "tcp"],
        ["auth-user-pass"],
        ["static-challenge", "Enter your PIN", "1"],
        ["FRIENDLY_NAME", "Example VPN"],
        ["HOST_LIST", "vpn.example.com\nbackup.example.com\n"],
    ])

    profile = resolve(options)
    if profile.error:
        print(f"✗ Profile rejected: {profile.message}")
        return None

    print(f"✓ Profile: {profile}")
    for entry in profile.server_list:
        print(f"  - {entry.friendly_name}")
    return profile


def challenge_example():
    """Answer a dynamic challenge and build a static reply"""
    print("Challenge/response")
    print("=" * 30)

    codec = ChallengeResponseCodec(Config())
    server_cookie = "CRV1:R,E:abc123:dXNlcg==:Enter your token"

    if codec.is_dynamic(server_cookie):
        try:
            cookie = codec.parse(server_cookie)
        except DynamicChallengeFormatError as e:
            print(f"✗ Bad challenge: {e}")
            return
        print(f"✓ Challenge for {cookie.username}: {cookie.challenge_text}")
        print(f"  Reply: {cookie.construct_dynamic_password('999999')}")

    print(f"✓ Static reply: {codec.construct_static_password('pass', 'resp')}")


if __name__ == "__main__":
    profile_example()
    print()
    challenge_example()
