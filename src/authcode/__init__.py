import logging

from .config import DEFAULT_DIGITS as DEFAULT_DIGITS
from .digest import SHA1 as SHA1
from .digest import sha1 as sha1
from .digest import sha1_hex as sha1_hex
from .hotp import HOTP as HOTP
from .mac import HMAC as HMAC
from .mac import hmac_sha1 as hmac_sha1
from .mac import hmac_sha1_hex as hmac_sha1_hex
from .otp import OTP as OTP
from .otp import dynamic_truncate as dynamic_truncate
from .otp import generate_code as generate_code
from .totp import TOTP as TOTP

# Library code only emits records; the application decides where they go
logging.getLogger(__name__).addHandler(logging.NullHandler())

#   (secret, counter)
#       OTP.int_to_bytestring()   -> 8 big-endian bytes
#       mac.hmac_sha1()           -> 20 bytes (two passes of digest.SHA1)
#       otp.dynamic_truncate()    -> 31-bit integer
#       otp.format_code()         -> "755224"
#
#   generate_code(b"12345678901234567890", 0)  # -> "755224"
#   sha1_hex(b"abc")                           # -> "a9993e36..."
