#!/usr/bin/env python
"""
AWS Signature Version 4 request signing.
"""

from .exc import (
    InvalidHeaderInputError, InvalidQueryInputError, InvalidSignatureError,
    MalformedTimestampError, SigningError, UnsupportedValueKindError)
from .sigv4 import (
    AWS4_HMAC_SHA256, AWS4_HMAC_SHA512, AWSSigV4Signer, AWSSigV4S3Signer,
    PathEncodingPolicy, SigningAlgorithm, calculate_signature,
    derive_signing_key, get_authorization_header, get_canonical_headers,
    get_canonical_query_string, get_canonical_request, get_canonical_uri_path,
    get_credential_scope, get_signed_headers, get_string_to_sign,
    hash_payload, sign_string)

__version__ = "0.1.0"

# Local variables:
# mode: Python
# tab-width: 8
# indent-tabs-mode: nil
# End:
# vi: set expandtab tabstop=8
