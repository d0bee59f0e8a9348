"""
=============================================================================
HTTP RESPONSE ASSERTIONS
=============================================================================

Stateless functions, one per check. Each takes an HttpResponse first and
returns an AssertionResult:

    from restassert.assertions import http_response as r

    result = r.is_cache_control_equal_to(response, "no-cache, no-store")
    assert result.is_success, result.message

    # or, raising AssertionError with the message:
    r.is_json(response).check()

=============================================================================
EXPECTED VALUES
=============================================================================

Structured headers accept the expected value either as a raw string or
as an already parsed value:

    r.is_frame_options_equal_to(response, "SAMEORIGIN")
    r.is_frame_options_equal_to(response, FrameOptions.same_origin())

A raw string is parsed immediately. If it is not a valid value for the
header, InvalidHeaderValueError is raised right here: the test itself is
broken, so there is nothing meaningful to report about the response.

    ┌─────────────────────────────┬──────────────────────────────────────┐
    │  Bad EXPECTED value         │  raises InvalidHeaderValueError      │
    │  Bad ACTUAL value           │  returns failure(InvalidHeaderValue) │
    └─────────────────────────────┴──────────────────────────────────────┘

=============================================================================
"""

from datetime import datetime
from typing import Iterable, Optional, Sequence, Tuple, Union

from ..common.dates import parse_http_date
from ..common.strings import is_token
from ..config import AssertConfig
from ..exceptions import InvalidHeaderValueError
from ..headers.base import HttpHeaderParser, HttpHeaderValue
from ..headers.cache_control import CACHE_CONTROL_PARSER, CacheControl
from ..headers.content_encoding import CONTENT_ENCODING_PARSER, ContentEncoding
from ..headers.content_security_policy import CONTENT_SECURITY_POLICY_PARSER, ContentSecurityPolicy
from ..headers.content_type_options import CONTENT_TYPE_OPTIONS_PARSER, ContentTypeOptions
from ..headers.frame_options import FRAME_OPTIONS_PARSER, FrameOptions
from ..headers.media_type import MEDIA_TYPE_PARSER, MediaType
from ..headers.strict_transport_security import STRICT_TRANSPORT_SECURITY_PARSER, StrictTransportSecurity
from ..headers.token_list import (
    ALLOW_HEADERS_PARSER,
    ALLOW_METHODS_PARSER,
    EXPOSE_HEADERS_PARSER,
    RequestMethod,
    TokenList,
    TokenListParser,
)
from ..headers.xss_protection import XSS_PROTECTION_PARSER, XssProtection
from ..http.header_names import HttpHeader
from ..http.response import HttpResponse
from ..http.status_codes import HTTPStatus, StatusRange
from .impl import (
    DoesNotHaveHeaderAssertion,
    HasCharsetAssertion,
    HasHeaderAssertion,
    HasMimeTypeAssertion,
    IsDateHeaderEqualToAssertion,
    IsHeaderEqualToAssertion,
    IsHeaderMatchingAssertion,
    StatusBetweenAssertion,
    StatusEqualAssertion,
    StatusOutOfAssertion,
)
from .result import AssertionResult

DateLike = Union[str, datetime]


# =============================================================================
# STATUS CODE
# =============================================================================

def is_status_equal(response: HttpResponse, status: int) -> AssertionResult:
    return StatusEqualAssertion(status).handle(response)


def is_status_between(response: HttpResponse, start: int, end: int) -> AssertionResult:
    """Status in [start, end], bounds included."""
    return StatusBetweenAssertion(start, end).handle(response)


def is_status_out_of(response: HttpResponse, start: int, end: int) -> AssertionResult:
    """Status outside [start, end]."""
    return StatusOutOfAssertion(start, end).handle(response)


def is_ok(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.OK)


def is_created(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.CREATED)


def is_accepted(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.ACCEPTED)


def is_no_content(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.NO_CONTENT)


def is_reset_content(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.RESET_CONTENT)


def is_partial_content(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.PARTIAL_CONTENT)


def is_moved_permanently(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.MOVED_PERMANENTLY)


def is_moved_temporarily(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.FOUND)


def is_not_modified(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.NOT_MODIFIED)


def is_bad_request(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.BAD_REQUEST)


def is_unauthorized(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.UNAUTHORIZED)


def is_forbidden(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.FORBIDDEN)


def is_not_found(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.NOT_FOUND)


def is_method_not_allowed(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.METHOD_NOT_ALLOWED)


def is_not_acceptable(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.NOT_ACCEPTABLE)


def is_conflict(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.CONFLICT)


def is_pre_condition_failed(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.PRECONDITION_FAILED)


def is_unsupported_media_type(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.UNSUPPORTED_MEDIA_TYPE)


def is_internal_server_error(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.INTERNAL_SERVER_ERROR)


def is_not_implemented(response: HttpResponse) -> AssertionResult:
    return is_status_equal(response, HTTPStatus.NOT_IMPLEMENTED)


def is_success(response: HttpResponse) -> AssertionResult:
    return _in_range(response, StatusRange.SUCCESS)


def is_not_success(response: HttpResponse) -> AssertionResult:
    return _out_of_range(response, StatusRange.SUCCESS)


def is_redirection(response: HttpResponse) -> AssertionResult:
    return _in_range(response, StatusRange.REDIRECTION)


def is_not_redirection(response: HttpResponse) -> AssertionResult:
    return _out_of_range(response, StatusRange.REDIRECTION)


def is_client_error(response: HttpResponse) -> AssertionResult:
    return _in_range(response, StatusRange.CLIENT_ERROR)


def is_not_client_error(response: HttpResponse) -> AssertionResult:
    return _out_of_range(response, StatusRange.CLIENT_ERROR)


def is_server_error(response: HttpResponse) -> AssertionResult:
    return _in_range(response, StatusRange.SERVER_ERROR)


def is_not_server_error(response: HttpResponse) -> AssertionResult:
    return _out_of_range(response, StatusRange.SERVER_ERROR)


def _in_range(response: HttpResponse, status_range: StatusRange) -> AssertionResult:
    return is_status_between(response, status_range.start, status_range.end)


def _out_of_range(response: HttpResponse, status_range: StatusRange) -> AssertionResult:
    return is_status_out_of(response, status_range.start, status_range.end)


# =============================================================================
# GENERIC HEADERS
# =============================================================================

def has_header(response: HttpResponse, name: str) -> AssertionResult:
    return HasHeaderAssertion(name).handle(response)


def does_not_have_header(response: HttpResponse, name: str) -> AssertionResult:
    return DoesNotHaveHeaderAssertion(name).handle(response)


def is_header_equal_to(
    response: HttpResponse,
    name: str,
    value: str,
    case_insensitive: bool = False,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    """
    Compare a header with a literal value.

    Args:
        response: The response to check.
        name: Header name, any case.
        value: Expected value, compared after trimming.
        case_insensitive: Ignore the case of the values.
        config: Provides extra single-valued header names.
    """
    extra = _single_value_headers(config)
    assertion = IsHeaderEqualToAssertion(name, value, case_insensitive, single_value_headers=extra)
    return assertion.handle(response)


def is_header_matching(
    response: HttpResponse,
    name: str,
    expected: Union[str, HttpHeaderValue],
    parser: HttpHeaderParser,
    fold: bool = False,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    """
    Compare a header with an expected value through a grammar.

    Raises:
        InvalidHeaderValueError: If expected is a string that the parser
            rejects.
    """
    extra = _single_value_headers(config)
    value = _expected(expected, parser)
    return IsHeaderMatchingAssertion(name, value, parser, fold, single_value_headers=extra).handle(response)


def _expected(value: Union[str, HttpHeaderValue], parser: HttpHeaderParser) -> HttpHeaderValue:
    if isinstance(value, HttpHeaderValue):
        return value
    return parser.parse(value)


def _single_value_headers(config: Optional[AssertConfig]) -> Tuple[str, ...]:
    return config.single_value_headers if config else ()


def _matching(
    response: HttpResponse,
    header: HttpHeader,
    expected: Union[str, HttpHeaderValue],
    parser: HttpHeaderParser,
    fold: bool = False,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    value = _expected(expected, parser)
    assertion = IsHeaderMatchingAssertion(
        header.header_name, value, parser, fold, single_value_headers=_single_value_headers(config)
    )
    return assertion.handle(response)


def _literal(
    response: HttpResponse,
    header: HttpHeader,
    value: object,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    extra = _single_value_headers(config)
    assertion = IsHeaderEqualToAssertion(header.header_name, str(value), single_value_headers=extra)
    return assertion.handle(response)


def _date(
    response: HttpResponse,
    header: HttpHeader,
    value: DateLike,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    if isinstance(value, str):
        value = parse_http_date(value, header.header_name)
    extra = _single_value_headers(config)
    return IsDateHeaderEqualToAssertion(header.header_name, value, single_value_headers=extra).handle(response)


def _has(response: HttpResponse, header: HttpHeader) -> AssertionResult:
    return has_header(response, header.header_name)


def _does_not_have(response: HttpResponse, header: HttpHeader) -> AssertionResult:
    return does_not_have_header(response, header.header_name)


# =============================================================================
# ETAG / LOCATION / CONTENT-DISPOSITION / CONTENT-LENGTH / PRAGMA
# =============================================================================

def has_etag(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.ETAG)


def does_not_have_etag(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.ETAG)


def is_etag_equal_to(
    response: HttpResponse,
    etag: str,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _literal(response, HttpHeader.ETAG, etag, config=config)


def has_location(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.LOCATION)


def does_not_have_location(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.LOCATION)


def is_location_equal_to(
    response: HttpResponse,
    location: str,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _literal(response, HttpHeader.LOCATION, location, config=config)


def has_content_disposition(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.CONTENT_DISPOSITION)


def does_not_have_content_disposition(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.CONTENT_DISPOSITION)


def is_content_disposition_equal_to(
    response: HttpResponse,
    value: str,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _literal(response, HttpHeader.CONTENT_DISPOSITION, value, config=config)


def has_content_length(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.CONTENT_LENGTH)


def does_not_have_content_length(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.CONTENT_LENGTH)


def is_content_length_equal_to(
    response: HttpResponse,
    length: int,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _literal(response, HttpHeader.CONTENT_LENGTH, length, config=config)


def has_pragma(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.PRAGMA)


def does_not_have_pragma(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.PRAGMA)


def is_pragma_equal_to(
    response: HttpResponse,
    pragma: str,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _literal(response, HttpHeader.PRAGMA, pragma, config=config)


# =============================================================================
# DATES
# =============================================================================

def has_last_modified(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.LAST_MODIFIED)


def does_not_have_last_modified(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.LAST_MODIFIED)


def is_last_modified_equal_to(
    response: HttpResponse,
    value: DateLike,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    """Last-Modified equals a datetime or an HTTP-date in any of its formats."""
    return _date(response, HttpHeader.LAST_MODIFIED, value, config=config)


def has_expires(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.EXPIRES)


def does_not_have_expires(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.EXPIRES)


def is_expires_equal_to(
    response: HttpResponse,
    value: DateLike,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _date(response, HttpHeader.EXPIRES, value, config=config)


# =============================================================================
# CONTENT-TYPE / CONTENT-ENCODING
# =============================================================================

def has_content_type(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.CONTENT_TYPE)


def does_not_have_content_type(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.CONTENT_TYPE)


def is_content_type_equal_to(
    response: HttpResponse,
    value: Union[str, MediaType],
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    """Full media type comparison, parameters included."""
    return _matching(response, HttpHeader.CONTENT_TYPE, value, MEDIA_TYPE_PARSER, config=config)


def has_content_encoding(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.CONTENT_ENCODING)


def does_not_have_content_encoding(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.CONTENT_ENCODING)


def is_content_encoding_equal_to(
    response: HttpResponse,
    value: Union[str, ContentEncoding],
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    """Ordered comparison: "deflate, gzip" is not "gzip, deflate"."""
    return _matching(response, HttpHeader.CONTENT_ENCODING, value, CONTENT_ENCODING_PARSER, config=config)


def is_gzipped(response: HttpResponse, config: Optional[AssertConfig] = None) -> AssertionResult:
    return is_content_encoding_equal_to(response, ContentEncoding.gzip(), config)


# =============================================================================
# CACHING
# =============================================================================

def has_cache_control(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.CACHE_CONTROL)


def does_not_have_cache_control(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.CACHE_CONTROL)


def is_cache_control_equal_to(
    response: HttpResponse,
    value: Union[str, CacheControl],
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    """
    Compare Cache-Control as a set of directives.

    Several Cache-Control headers are folded into one list first, so
    "no-cache" + "no-store" equals "no-store, no-cache".
    """
    return _matching(
        response,
        HttpHeader.CACHE_CONTROL,
        value,
        CACHE_CONTROL_PARSER,
        fold=True,
        config=config,
    )


# =============================================================================
# SECURITY HEADERS
# =============================================================================

def has_xss_protection(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.X_XSS_PROTECTION)


def does_not_have_xss_protection(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.X_XSS_PROTECTION)


def is_xss_protection_equal_to(
    response: HttpResponse,
    value: Union[str, XssProtection],
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _matching(response, HttpHeader.X_XSS_PROTECTION, value, XSS_PROTECTION_PARSER, config=config)


def has_content_type_options(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.X_CONTENT_TYPE_OPTIONS)


def does_not_have_content_type_options(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.X_CONTENT_TYPE_OPTIONS)


def is_content_type_options_equal_to(
    response: HttpResponse,
    value: Union[str, ContentTypeOptions] = ContentTypeOptions.nosniff(),
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _matching(
        response,
        HttpHeader.X_CONTENT_TYPE_OPTIONS,
        value,
        CONTENT_TYPE_OPTIONS_PARSER,
        config=config,
    )


def has_frame_options(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.X_FRAME_OPTIONS)


def does_not_have_frame_options(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.X_FRAME_OPTIONS)


def is_frame_options_equal_to(
    response: HttpResponse,
    value: Union[str, FrameOptions],
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _matching(response, HttpHeader.X_FRAME_OPTIONS, value, FRAME_OPTIONS_PARSER, config=config)


def has_content_security_policy(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.CONTENT_SECURITY_POLICY)


def does_not_have_content_security_policy(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.CONTENT_SECURITY_POLICY)


def is_content_security_policy_equal_to(
    response: HttpResponse,
    value: Union[str, ContentSecurityPolicy],
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    """Compare policies ignoring directive order and source order."""
    return _matching(
        response,
        HttpHeader.CONTENT_SECURITY_POLICY,
        value,
        CONTENT_SECURITY_POLICY_PARSER,
        config=config,
    )


def has_strict_transport_security(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.STRICT_TRANSPORT_SECURITY)


def does_not_have_strict_transport_security(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.STRICT_TRANSPORT_SECURITY)


def is_strict_transport_security_equal_to(
    response: HttpResponse,
    value: Union[str, StrictTransportSecurity],
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _matching(
        response,
        HttpHeader.STRICT_TRANSPORT_SECURITY,
        value,
        STRICT_TRANSPORT_SECURITY_PARSER,
        config=config,
    )


# =============================================================================
# CORS
# =============================================================================

def has_access_control_allow_origin(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.ACCESS_CONTROL_ALLOW_ORIGIN)


def does_not_have_access_control_allow_origin(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.ACCESS_CONTROL_ALLOW_ORIGIN)


def is_access_control_allow_origin_equal_to(
    response: HttpResponse,
    origin: str,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _literal(response, HttpHeader.ACCESS_CONTROL_ALLOW_ORIGIN, origin, config=config)


def has_access_control_allow_headers(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.ACCESS_CONTROL_ALLOW_HEADERS)


def does_not_have_access_control_allow_headers(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.ACCESS_CONTROL_ALLOW_HEADERS)


def is_access_control_allow_headers_equal_to(
    response: HttpResponse,
    *headers,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    """
    Compare allowed headers as a case-insensitive set.

    Accepts a raw value ("X-Foo, X-Bar"), several names ("X-Foo",
    "X-Bar"), an iterable of names, or a TokenList.
    """
    expected = _token_list(headers, ALLOW_HEADERS_PARSER)
    return _matching(
        response,
        HttpHeader.ACCESS_CONTROL_ALLOW_HEADERS,
        expected,
        ALLOW_HEADERS_PARSER,
        config=config,
    )


def has_access_control_expose_headers(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.ACCESS_CONTROL_EXPOSE_HEADERS)


def does_not_have_access_control_expose_headers(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.ACCESS_CONTROL_EXPOSE_HEADERS)


def is_access_control_expose_headers_equal_to(
    response: HttpResponse,
    *headers,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    expected = _token_list(headers, EXPOSE_HEADERS_PARSER)
    return _matching(
        response,
        HttpHeader.ACCESS_CONTROL_EXPOSE_HEADERS,
        expected,
        EXPOSE_HEADERS_PARSER,
        config=config,
    )


def has_access_control_allow_methods(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.ACCESS_CONTROL_ALLOW_METHODS)


def does_not_have_access_control_allow_methods(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.ACCESS_CONTROL_ALLOW_METHODS)


def is_access_control_allow_methods_equal_to(
    response: HttpResponse,
    *methods,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    """Compare allowed methods as a case-sensitive set; RequestMethod values are accepted."""
    expected = _token_list(methods, ALLOW_METHODS_PARSER)
    return _matching(
        response,
        HttpHeader.ACCESS_CONTROL_ALLOW_METHODS,
        expected,
        ALLOW_METHODS_PARSER,
        config=config,
    )


def has_access_control_allow_credentials(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.ACCESS_CONTROL_ALLOW_CREDENTIALS)


def does_not_have_access_control_allow_credentials(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.ACCESS_CONTROL_ALLOW_CREDENTIALS)


def is_access_control_allow_credentials_equal_to(
    response: HttpResponse,
    allowed: bool,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _literal(
        response,
        HttpHeader.ACCESS_CONTROL_ALLOW_CREDENTIALS,
        "true" if allowed else "false",
        config=config,
    )


def has_access_control_max_age(response: HttpResponse) -> AssertionResult:
    return _has(response, HttpHeader.ACCESS_CONTROL_MAX_AGE)


def does_not_have_access_control_max_age(response: HttpResponse) -> AssertionResult:
    return _does_not_have(response, HttpHeader.ACCESS_CONTROL_MAX_AGE)


def is_access_control_max_age_equal_to(
    response: HttpResponse,
    max_age: int,
    config: Optional[AssertConfig] = None,
) -> AssertionResult:
    return _literal(response, HttpHeader.ACCESS_CONTROL_MAX_AGE, max_age, config=config)


def _token_list(values: Sequence, parser: TokenListParser) -> TokenList:
    if len(values) == 1:
        value = values[0]
        if isinstance(value, TokenList):
            return value
        if isinstance(value, str):
            return parser.parse(value)
        if isinstance(value, Iterable):
            values = tuple(value)

    tokens = [str(v).strip() for v in values]
    if not tokens:
        raise InvalidHeaderValueError(parser.header_name, "", "at least one value is required")
    for token in tokens:
        if not is_token(token):
            raise InvalidHeaderValueError(parser.header_name, token, "not a valid token")
    return TokenList(tuple(tokens), parser.case_sensitive)


# =============================================================================
# MIME TYPES AND CHARSET
# =============================================================================

def has_mime_type(response: HttpResponse, mime_type: Union[str, MediaType]) -> AssertionResult:
    """Content-Type has the given "type/subtype", parameters ignored."""
    return has_mime_type_in(response, [mime_type])


def has_mime_type_in(response: HttpResponse, mime_types: Iterable[Union[str, MediaType]]) -> AssertionResult:
    names = [m.mime_type if isinstance(m, MediaType) else m for m in mime_types]
    return HasMimeTypeAssertion(names).handle(response)


def is_json(response: HttpResponse) -> AssertionResult:
    return has_mime_type(response, "application/json")


def is_xml(response: HttpResponse) -> AssertionResult:
    return has_mime_type_in(response, ["application/xml", "text/xml"])


def is_html(response: HttpResponse) -> AssertionResult:
    return has_mime_type_in(response, ["text/html", "application/xhtml+xml"])


def is_css(response: HttpResponse) -> AssertionResult:
    return has_mime_type(response, "text/css")


def is_text(response: HttpResponse) -> AssertionResult:
    return has_mime_type(response, "text/plain")


def is_csv(response: HttpResponse) -> AssertionResult:
    return has_mime_type(response, "text/csv")


def is_pdf(response: HttpResponse) -> AssertionResult:
    return has_mime_type(response, "application/pdf")


def is_javascript(response: HttpResponse) -> AssertionResult:
    return has_mime_type_in(response, ["application/javascript", "text/javascript"])


def has_charset(response: HttpResponse, charset: Optional[str] = None) -> AssertionResult:
    """Content-Type has a charset, equal to the given one if any."""
    return HasCharsetAssertion(charset).handle(response)


def is_utf8(response: HttpResponse) -> AssertionResult:
    return has_charset(response, "UTF-8")
