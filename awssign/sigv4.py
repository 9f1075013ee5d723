"""
SigV4 request signing routines.

The canonicalization and signing pipeline is available both as module-level
functions (one per step) and as the AWSSigV4Signer/AWSSigV4S3Signer classes,
which carry a request's parameters and compute each intermediate value on
demand.
"""

from collections.abc import Mapping
from enum import Enum
from hashlib import sha256, sha512
import hmac
from logging import getLogger
from re import compile as re_compile
from urllib.parse import parse_qsl, quote, urlsplit

from .dateutil import (
    format_amz_date, format_date_stamp, parse_timestamp, utc_now)
from .exc import (
    InvalidHeaderInputError, InvalidQueryInputError, InvalidSignatureError,
    MalformedTimestampError, UnsupportedValueKindError)

# pylint: disable=C0103

# Algorithm labels for AWS SigV4
AWS4_HMAC_SHA256 = "AWS4-HMAC-SHA256"
AWS4_HMAC_SHA512 = "AWS4-HMAC-SHA512"

# Terminator of the credential scope and the last key derivation step
AWS4_REQUEST = "aws4_request"

# Prefix applied to the secret key before the first derivation step
_aws4_prefix = "AWS4"

# Request methods we are willing to sign
_http_methods = frozenset([
    "CONNECT", "DELETE", "GET", "HEAD", "OPTIONS", "PATCH", "POST", "PUT",
    "TRACE",
])

# Match for multiple slashes
_multislash = re_compile(r"//+")

# Match for multiple spaces
_multispace = re_compile(r"  +")

# YYYYMMDD prefix of a date or timestamp
_date_stamp_regex = re_compile(r"^[0-9]{8}")

# URL with a scheme, as opposed to a bare path
_scheme_regex = re_compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")

# Length of YYYYMMDDTHHMMSSZ
_amz_date_length = 16

# Logging instance
log = getLogger("awssign.sigv4")

class SigningAlgorithm(Enum):
    """
    The digest used for the payload hash, the canonical request hash, and
    every HMAC in the signing process. The value is the label that opens the
    string to sign and the Authorization header.
    """
    SHA256 = AWS4_HMAC_SHA256
    SHA512 = AWS4_HMAC_SHA512

    @property
    def digestmod(self):
        """
        The hashlib constructor for this algorithm.
        """
        return _digestmods[self]

_digestmods = {
    SigningAlgorithm.SHA256: sha256,
    SigningAlgorithm.SHA512: sha512,
}

class PathEncodingPolicy(Enum):
    """
    How the URI path is canonicalized.

    GENERAL: resolve '.' and '..', collapse repeated slashes, and
        percent-encode each segment twice.
    S3: keep the path verbatim and percent-encode each segment once.
    """
    GENERAL = "general"
    S3 = "s3"

def _get_algorithm(algorithm):
    if isinstance(algorithm, SigningAlgorithm):
        return algorithm
    return SigningAlgorithm(algorithm)

def _get_policy(policy):
    if isinstance(policy, PathEncodingPolicy):
        return policy
    return PathEncodingPolicy(policy)

def _get_method(method):
    if not isinstance(method, str):
        raise TypeError("Expected request_method to be a string.")

    result = method.upper()
    if result not in _http_methods:
        raise ValueError("Unsupported HTTP method: %r" % (method,))

    return result

def _split_url(url):
    """
    _split_url(url) -> (str, str)

    Return the path and raw query string of a full URL or of a bare
    path with an optional query.
    """
    if not isinstance(url, str):
        raise TypeError("Expected url to be a string.")

    if _scheme_regex.match(url):
        parts = urlsplit(url)
        return parts.path, parts.query

    # Bare paths may begin with '//', which urlsplit would read as a netloc.
    path, _, query_string = url.partition("#")[0].partition("?")
    return path, query_string

def _get_date_stamp(date):
    if not isinstance(date, str):
        raise TypeError("Expected date to be a string.")

    if not _date_stamp_regex.match(date):
        raise MalformedTimestampError(
            "Date does not begin with YYYYMMDD: %r" % (date,))

    return date[:8]

def _get_scope_name(kind, value):
    if not isinstance(value, str):
        raise TypeError("Expected %s to be a string." % kind)
    return value.lower()

def encode_uri_path_segment(segment, passes=1):
    """
    encode_uri_path_segment(segment, passes=1) -> str

    Percent-encode a single path segment. Everything except the RFC 3986
    unreserved characters (letters, digits, '-', '_', '.', '~') is encoded,
    including '/'; a space becomes %20. Each additional pass re-encodes the
    previous result, so a '%' from the first pass becomes %25.
    """
    result = segment
    for _ in range(passes):
        result = quote(result, safe="")
    return result

def normalize_uri_path(uri_path):
    """
    normalize_uri_path(uri_path) -> str

    Collapse repeated slashes and resolve '.' and '..' segments. The result
    is always absolute. A trailing slash on the input is kept on the output
    unless the path resolves to the root. '..' segments that would climb
    above the root are dropped.
    """
    components = []
    for component in _multislash.sub("/", uri_path).split("/"):
        if component in ("", "."):
            continue
        elif component == "..":
            if components:
                components.pop()
        else:
            components.append(component)

    result = "/" + "/".join(components)
    if uri_path.endswith("/") and not result.endswith("/"):
        result += "/"

    return result

def get_canonical_uri_path(uri_path, policy=PathEncodingPolicy.GENERAL):
    """
    get_canonical_uri_path(uri_path, policy=PathEncodingPolicy.GENERAL) -> str

    Canonicalize a URI path. Under the GENERAL policy the path is normalized
    (see normalize_uri_path) and every segment is percent-encoded twice.
    Under the S3 policy the path is left as-is and every segment is
    percent-encoded once. The result always starts with '/'.
    """
    if not isinstance(uri_path, str):
        raise TypeError("Expected uri_path to be a string.")

    if _get_policy(policy) is PathEncodingPolicy.S3:
        # Do *not* handle ., .., or //; these are distinct S3 keys.
        path = uri_path
        passes = 1
    else:
        path = normalize_uri_path(uri_path)
        passes = 2

    result = "/".join([encode_uri_path_segment(segment, passes)
                       for segment in path.split("/")])
    if not result.startswith("/"):
        result = "/" + result

    return result

def to_query_value(value):
    """
    to_query_value(value) -> str

    Convert a query parameter value to the string that gets signed. Strings
    are used verbatim, None becomes an empty string, booleans become 'true'
    or 'false', and integers and floats use their decimal representation.
    Anything else raises UnsupportedValueKindError.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    # bool before int; bool is an int subclass.
    if isinstance(value, bool):
        return "true" if value else "false"
    # Subclasses (IntEnum, etc.) may override __repr__.
    if isinstance(value, int):
        return int.__repr__(value)
    if isinstance(value, float):
        return float.__repr__(value)

    raise UnsupportedValueKindError(
        "Unsupported query parameter value kind: %r" % type(value).__name__)

def encode_query_pairs(pairs):
    """
    encode_query_pairs(pairs: Iterable[Tuple[str, str]]) -> str

    Percent-encode each key and value, sort by the encoded (key, value), and
    join them into a query string. Duplicate keys are allowed.
    """
    encoded = sorted([(quote(key, safe="", errors="surrogateescape"),
                       quote(value, safe="", errors="surrogateescape"))
                      for key, value in pairs])
    return "&".join(["%s=%s" % item for item in encoded])

def parse_query_string(query_string):
    """
    parse_query_string(query_string) -> List[Tuple[str, str]]

    Split a raw query string into decoded (key, value) pairs, keeping blank
    values. Escapes that are not valid UTF-8 decode to surrogates, so
    encode_query_pairs restores the original bytes.
    """
    return parse_qsl(query_string, keep_blank_values=True,
                     errors="surrogateescape")

def get_canonical_query_string(params):
    """
    get_canonical_query_string(params: Mapping[str, Any]) -> str

    Build the canonical query string from a flat mapping of parameter names
    to scalar values. None (or an empty mapping) yields an empty string.

    An InvalidQueryInputError exception is raised if params is not a
    mapping or a key is not a string; an UnsupportedValueKindError exception
    is raised for a non-scalar value.
    """
    if params is None:
        return ""

    if not isinstance(params, Mapping):
        raise InvalidQueryInputError(
            "Expected query parameters to be a mapping: %r" %
            type(params).__name__)

    for key in params:
        if not isinstance(key, str):
            raise InvalidQueryInputError(
                "Query parameter name must be a string: %r" % (key,))

    return encode_query_pairs(
        [(key, to_query_value(value)) for key, value in params.items()])

def trim_header_value(value):
    """
    Strip surrounding whitespace and collapse runs of spaces to one space.
    """
    return _multispace.sub(" ", value.strip())

def _header_values(name, header_values):
    if isinstance(header_values, str):
        return [header_values]

    if isinstance(header_values, (bytes, bytearray)):
        raise InvalidHeaderInputError(
            "Header %r value must be a string or an iterable of strings: %r" %
            (name, type(header_values).__name__))

    try:
        values = list(header_values)
    except TypeError:
        raise InvalidHeaderInputError(
            "Header %r value must be a string or an iterable of strings: %r" %
            (name, type(header_values).__name__))

    for i, el in enumerate(values):
        if not isinstance(el, str):
            raise InvalidHeaderInputError(
                "Header %r value %d must be a string: %r" %
                (name, i, type(el).__name__))

    return values

def _header_pair(item):
    # A two-character string would otherwise unpack as a (name, value) pair.
    if isinstance(item, (str, bytes, bytearray)):
        raise TypeError("Header pair must not be a string: %r" % (item,))
    name, value = item
    return name, value

def get_header_items(headers):
    """
    get_header_items(headers) -> List[Tuple[str, List[str]]]

    Validate a header collection and return it as a list of
    (name, [value, ...]) pairs in input order. headers may be None, a
    mapping, or an iterable of (name, value) pairs; each value is either a
    string or an iterable of strings.
    """
    if headers is None:
        return []

    if isinstance(headers, Mapping):
        items = list(headers.items())
    elif isinstance(headers, (str, bytes, bytearray)):
        raise InvalidHeaderInputError(
            "Expected headers to be a mapping: %r" % type(headers).__name__)
    else:
        try:
            items = [_header_pair(item) for item in headers]
        except (TypeError, ValueError):
            raise InvalidHeaderInputError(
                "Expected headers to be a mapping or an iterable of "
                "(name, value) pairs: %r" % type(headers).__name__)

    result = []
    for name, value in items:
        if not isinstance(name, str):
            raise InvalidHeaderInputError(
                "Header must be a string: %r" % (name,))
        result.append((name, _header_values(name, value)))

    return result

def get_canonical_headers(headers):
    """
    get_canonical_headers(headers) -> (str, str)

    Return the signed header list and the canonical header block.

    Header names are trimmed and lower-cased; names differing only in case
    are merged. Each value is trimmed with interior runs of spaces collapsed,
    and multiple values are joined with ','. Headers are emitted sorted by
    name regardless of input order: the signed header list joins the names
    with ';', and the canonical block has one 'name:value\\n' line per header.
    """
    merged = {}
    for name, values in get_header_items(headers):
        key = name.strip().lower()
        merged.setdefault(key, []).extend(
            [trim_header_value(value) for value in values])

    names = sorted(merged)
    signed_headers = ";".join(names)
    canonical_headers = "".join(
        ["%s:%s\n" % (name, ",".join(merged[name])) for name in names])

    return signed_headers, canonical_headers

def get_signed_headers(headers):
    """
    The ';'-joined list of lower-cased header names that will be signed.
    """
    return get_canonical_headers(headers)[0]

def hash_payload(payload, algorithm=SigningAlgorithm.SHA256):
    """
    hash_payload(payload, algorithm=SigningAlgorithm.SHA256) -> str

    Lower-case hex digest of payload. Strings are hashed as UTF-8.
    """
    if isinstance(payload, str):
        payload = payload.encode("utf-8")
    elif not isinstance(payload, (bytes, bytearray, memoryview)):
        raise TypeError("Expected payload to be bytes.")

    return _get_algorithm(algorithm).digestmod(payload).hexdigest()

def get_canonical_request(method, url, query=None, headers=None, payload=b"",
                          policy=PathEncodingPolicy.GENERAL,
                          algorithm=SigningAlgorithm.SHA256):
    """
    The AWS SigV4 canonical request given parameters from an HTTP request.
    This process is outlined here:
    https://docs.aws.amazon.com/IAM/latest/UserGuide/create-signed-request.html

    The canonical request is:
        request_method + '\\n' +
        canonical_uri_path + '\\n' +
        canonical_query_string + '\\n' +
        canonical_headers + '\\n' +
        signed_headers + '\\n' +
        hex(hash(payload))

    The path is taken from url. If query is None the query string embedded
    in url is canonicalized; otherwise query is used and any query in url
    is ignored.
    """
    request_method = _get_method(method)
    uri_path, query_string = _split_url(url)

    if query is None:
        canonical_query_string = encode_query_pairs(
            parse_query_string(query_string))
    else:
        canonical_query_string = get_canonical_query_string(query)

    signed_headers, canonical_headers = get_canonical_headers(headers)

    return "\n".join([
        request_method,
        get_canonical_uri_path(uri_path, policy),
        canonical_query_string,
        canonical_headers,
        signed_headers,
        hash_payload(payload, algorithm),
    ])

def get_credential_scope(date, region, service):
    """
    get_credential_scope(date, region, service) -> str

    The scope of the credentials: 'YYYYMMDD/region/service/aws4_request'.
    Only the first eight characters of date are used; if date is None or
    empty, today's UTC date is used.
    """
    if not date:
        date = format_date_stamp(utc_now())

    return "/".join([
        _get_date_stamp(date),
        _get_scope_name("region", region),
        _get_scope_name("service", service),
        AWS4_REQUEST,
    ])

def get_string_to_sign(request_hash, scope, date,
                       algorithm=SigningAlgorithm.SHA256):
    """
    The AWS SigV4 string being signed:
        algorithm + '\\n' + YYYYMMDDTHHMMSSZ + '\\n' + scope + '\\n' +
        request_hash

    date must begin with the tight ISO 8601 form YYYYMMDDTHHMMSSZ; if it is
    None or empty, the current UTC instant is used. A MalformedTimestampError
    exception is raised if 'T' or 'Z' are not where they belong.
    """
    algorithm = _get_algorithm(algorithm)

    if not date:
        date = format_amz_date(utc_now())
    elif not isinstance(date, str):
        raise TypeError("Expected date to be a string.")

    if (len(date) < _amz_date_length or date[8] != "T" or
            date[_amz_date_length - 1] != "Z"):
        raise MalformedTimestampError(
            "Timestamp is not in YYYYMMDDTHHMMSSZ form: %r" % (date,))

    return "\n".join([
        algorithm.value,
        date[:_amz_date_length],
        scope,
        request_hash,
    ])

def derive_signing_key(secret_key, date, region, service,
                       algorithm=SigningAlgorithm.SHA256):
    """
    derive_signing_key(secret_key, date, region, service,
                       algorithm=SigningAlgorithm.SHA256) -> bytes

    Derive the raw signing key for a date/region/service scope by chaining
    four HMACs, each keyed with the previous result.
    """
    if not isinstance(secret_key, str):
        raise TypeError("Expected secret_key to be a string.")

    digestmod = _get_algorithm(algorithm).digestmod
    date_stamp = _get_date_stamp(date)
    region = _get_scope_name("region", region)
    service = _get_scope_name("service", service)

    k_secret = (_aws4_prefix + secret_key).encode("utf-8")
    k_date = hmac.new(k_secret, date_stamp.encode("utf-8"),
                      digestmod).digest()
    k_region = hmac.new(k_date, region.encode("utf-8"), digestmod).digest()
    k_service = hmac.new(k_region, service.encode("utf-8"),
                         digestmod).digest()
    return hmac.new(k_service, AWS4_REQUEST.encode("utf-8"),
                    digestmod).digest()

def sign_string(signing_key, string_to_sign,
                algorithm=SigningAlgorithm.SHA256):
    """
    HMAC string_to_sign with an already-derived signing key and return the
    lower-case hex result.
    """
    return hmac.new(signing_key, string_to_sign.encode("utf-8"),
                    _get_algorithm(algorithm).digestmod).hexdigest()

def calculate_signature(secret_key, date, region, service, string_to_sign,
                        algorithm=SigningAlgorithm.SHA256):
    """
    calculate_signature(secret_key, date, region, service, string_to_sign,
                        algorithm=SigningAlgorithm.SHA256) -> str

    The final lower-case hex signature over string_to_sign.
    """
    signing_key = derive_signing_key(
        secret_key, date, region, service, algorithm)
    return sign_string(signing_key, string_to_sign, algorithm)

def get_authorization_header(access_key, scope, signed_headers, signature,
                             algorithm=SigningAlgorithm.SHA256):
    """
    Render the value of the Authorization header.
    """
    return "%s Credential=%s/%s, SignedHeaders=%s, Signature=%s" % (
        _get_algorithm(algorithm).value, access_key, scope, signed_headers,
        signature)

class AWSSigV4Signer:
    # pylint: disable=R0902,R0904
    """
    Sign a request using AWS SigV4.
    """
    path_policy = PathEncodingPolicy.GENERAL

    def __init__(self, **kw):
        """
        AWSSigV4Signer(
            request_method: str,
            url: str,
            query_parameters: Optional[Mapping[str, Any]],
            headers: Mapping[str, Union[str, Iterable[str]]],
            body: bytes,
            region: str,
            service: str,
            access_key: Optional[str],
            secret_key: str,
            timestamp: Optional[Union[datetime, str]],
            algorithm: SigningAlgorithm=SigningAlgorithm.SHA256)

        Create a new AWSSigV4Signer instance. Properties can be specified
        as keyword arguments.

        request_method: The HTTP request method (GET, PUT, POST, etc.).
        url: The full URL, or just the path (and optional query string).
        query_parameters: A mapping of query parameter names to scalar
            values. If None, the query string embedded in url is used.
        headers: A mapping of header names to a value or list of values.
            Every header given here is signed.
        body: The request body (if any). This should be undecoded (bytes,
            not a Unicode str).
        region: The AWS region (or pseudo-region) the service is running in.
        service: The name of the service being called.
        access_key: The access key id; only needed for authorization_header.
        secret_key: The secret key that goes with access_key.
        timestamp: The request time. If None, the current time is used; it
            is read once, on first use, and kept for the life of the signer.
        algorithm: The digest to use.
        """
        super().__init__()
        self._request_method = "GET"
        self._url = "/"
        self._query_parameters = None
        self._headers = []
        self._body = b""
        self._region = "us-east-1"
        self._service = "none"
        self._access_key = None
        self._secret_key = None
        self._timestamp = None
        self._algorithm = SigningAlgorithm.SHA256

        for key, value in kw.items():
            setattr(self, key, value)
        return

    @property
    def request_method(self):
        """
        The HTTP method (GET, POST, PUT) used to make the request.
        """
        return self._request_method

    @request_method.setter
    def request_method(self, value):
        self._request_method = _get_method(value)
        return

    @property
    def url(self):
        """
        The URL (or path and query string) of the request.
        """
        return self._url

    @url.setter
    def url(self, value):
        if not isinstance(value, str):
            raise TypeError("Expected url to be a string.")

        self._url = value
        return

    @property
    def query_parameters(self):
        """
        The explicit query parameters, or None to use the query string
        embedded in the URL.
        """
        return self._query_parameters

    @query_parameters.setter
    def query_parameters(self, value):
        if value is not None:
            if not isinstance(value, Mapping):
                raise InvalidQueryInputError(
                    "Expected query parameters to be a mapping: %r" %
                    type(value).__name__)
            value = dict(value)

        self._query_parameters = value
        return

    @property
    def headers(self):
        """
        The HTTP headers to sign as a list of (name, [values]) pairs.
        """
        return self._headers

    @headers.setter
    def headers(self, value):
        if value is None:
            raise InvalidHeaderInputError("Expected headers to be a mapping.")

        self._headers = get_header_items(value)
        return

    @property
    def body(self):
        """
        The body sent with the HTTP request (for PUT and POST requests).
        """
        return self._body

    @body.setter
    def body(self, value):
        if not isinstance(value, bytes):
            raise TypeError("Expected body to be a byte array.")

        self._body = value
        return

    @property
    def region(self):
        """
        The region the service is running in.
        """
        return self._region

    @region.setter
    def region(self, value):
        if not isinstance(value, str):
            raise TypeError("Expected region to be a string.")

        self._region = value
        return

    @property
    def service(self):
        """
        The name of the service being invoked.
        """
        return self._service

    @service.setter
    def service(self, value):
        if not isinstance(value, str):
            raise TypeError("Expected service to be a string.")

        self._service = value
        return

    @property
    def access_key(self):
        """
        The access key id placed in the Authorization header.
        """
        return self._access_key

    @access_key.setter
    def access_key(self, value):
        if value is not None and not isinstance(value, str):
            raise TypeError("Expected access_key to be a string.")

        self._access_key = value
        return

    @property
    def secret_key(self):
        """
        The secret key used to derive the signing key.
        """
        return self._secret_key

    @secret_key.setter
    def secret_key(self, value):
        if value is not None and not isinstance(value, str):
            raise TypeError("Expected secret_key to be a string.")

        self._secret_key = value
        return

    @property
    def timestamp(self):
        """
        The timestamp of the request as an aware UTC datetime.
        """
        if self._timestamp is None:
            self._timestamp = utc_now()
        return self._timestamp

    @timestamp.setter
    def timestamp(self, value):
        if value is not None:
            value = parse_timestamp(value)

        self._timestamp = value
        return

    @property
    def algorithm(self):
        """
        The SigningAlgorithm in use.
        """
        return self._algorithm

    @algorithm.setter
    def algorithm(self, value):
        self._algorithm = _get_algorithm(value)
        return

    @property
    def amz_date(self):
        """
        The request timestamp in YYYYMMDDTHHMMSSZ form (X-Amz-Date).
        """
        return format_amz_date(self.timestamp)

    @property
    def date_stamp(self):
        """
        The UTC date of the request in YYYYMMDD form.
        """
        return format_date_stamp(self.timestamp)

    @property
    def canonical_uri_path(self):
        """
        The canonicalized URI path from the request.
        """
        return get_canonical_uri_path(_split_url(self.url)[0], self.path_policy)

    @property
    def canonical_query_string(self):
        """
        The canonical query string from the query parameters.
        """
        if self.query_parameters is None:
            return encode_query_pairs(
                parse_query_string(_split_url(self.url)[1]))
        return get_canonical_query_string(self.query_parameters)

    @property
    def signed_headers(self):
        """
        The ';'-separated, sorted list of signed header names.
        """
        return get_canonical_headers(self.headers)[0]

    @property
    def canonical_headers(self):
        """
        The canonical header block, one 'name:value' line per header.
        """
        return get_canonical_headers(self.headers)[1]

    @property
    def canonical_request(self):
        """
        The AWS SigV4 canonical request for this request.
        """
        result = get_canonical_request(
            self.request_method, self.url, self.query_parameters,
            self.headers, self.body, self.path_policy, self.algorithm)
        log.debug("Canonical request:\n%s", result)
        return result

    @property
    def credential_scope(self):
        """
        The scope of the credentials to use.
        """
        return get_credential_scope(self.date_stamp, self.region, self.service)

    @property
    def string_to_sign(self):
        """
        The AWS SigV4 string being signed.
        """
        result = get_string_to_sign(
            hash_payload(self.canonical_request, self.algorithm),
            self.credential_scope, self.amz_date, self.algorithm)
        log.debug("String to sign:\n%s", result)
        return result

    @property
    def signature(self):
        """
        The lower-case hex AWS SigV4 signature of the request.
        """
        if self.secret_key is None:
            raise ValueError("secret_key has not been set")

        return calculate_signature(
            self.secret_key, self.amz_date, self.region, self.service,
            self.string_to_sign, self.algorithm)

    @property
    def authorization_header(self):
        """
        The value to send in the Authorization header.
        """
        if self.access_key is None:
            raise ValueError("access_key has not been set")

        return get_authorization_header(
            self.access_key, self.credential_scope, self.signed_headers,
            self.signature, self.algorithm)

    def verify(self, signature):
        """
        Verifies that signature matches the signature of this request.
        """
        if not isinstance(signature, str):
            raise InvalidSignatureError(
                "Signature must be a string: %r" % type(signature).__name__)

        if not hmac.compare_digest(self.signature, signature):
            raise InvalidSignatureError(
                "Signature mismatch: got %r" % (signature,))

        return True

class AWSSigV4S3Signer(AWSSigV4Signer):
    """
    Variant of AWS SigV4 for S3-style signing.

    Compared to regular SigV4, the URI path is not normalized: consecutive
    slashes and '.'/'..' segments are preserved ("/a//b" is a distinct object
    from "/a/b"), and each path segment is percent-encoded only once.
    """
    path_policy = PathEncodingPolicy.S3

# Local variables:
# mode: Python
# tab-width: 8
# indent-tabs-mode: nil
# End:
# vi: set expandtab tabstop=8
