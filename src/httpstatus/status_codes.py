"""
=============================================================================
HTTP STATUS CONSTANTS
=============================================================================

Named integer constants for every code in the English dataset, for
readability at call sites:

    registry.get_reason_phrase(HTTPStatus.NOT_FOUND)    # 'Not Found'
    HTTPStatus.NOT_FOUND == 404                         # True

The registry itself never depends on this module. It works purely from
the loaded datasets, which is why custom codes (600-999) and locale
overrides have no constant here.

=============================================================================
INTERVIEW QUESTIONS ABOUT STATUS CODES
=============================================================================

Q: "What's the difference between 401 and 403?"
A: "401 Unauthorized means 'I don't know who you are' (authentication).
   403 Forbidden means 'I know who you are, but you can't do this' (authorization).
   Despite the name, 401 is really about authentication."

Q: "Why is 306 missing?"
A: "306 was 'Switch Proxy' in an early draft and was dropped. IANA lists
   it as (Unused), so it sits inside the 3xx band without being assigned.
   StatusRegistry.is_unassigned(306) is True."

Q: "Is 418 real?"
A: "It started as an April Fools RFC (2324), but enough software
   implemented it that it was reserved rather than reused."

=============================================================================
"""

from enum import IntEnum
from typing import Union

from . import response_class as rc
from .languages import Language, get_phrase
from .languages.en import STATUS_PHRASES


class HTTPStatus(IntEnum):
    """
    HTTP status codes as named constants.

    This enum extends IntEnum, so status codes can be used as integers:

        >>> HTTPStatus.OK
        <HTTPStatus.OK: 200>
        >>> HTTPStatus.OK == 200
        True
        >>> HTTPStatus.OK.phrase
        'OK'
    """

    # 1xx INFORMATIONAL
    CONTINUE = 100
    SWITCHING_PROTOCOLS = 101
    PROCESSING = 102             # RFC 2518
    EARLY_HINTS = 103            # RFC 8297

    # 2xx SUCCESS
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NON_AUTHORITATIVE_INFORMATION = 203
    NO_CONTENT = 204
    RESET_CONTENT = 205
    PARTIAL_CONTENT = 206
    MULTI_STATUS = 207           # RFC 4918
    ALREADY_REPORTED = 208       # RFC 5842
    IM_USED = 226                # RFC 3229

    # 3xx REDIRECTION
    MULTIPLE_CHOICES = 300
    MOVED_PERMANENTLY = 301
    FOUND = 302
    SEE_OTHER = 303
    NOT_MODIFIED = 304
    USE_PROXY = 305
    TEMPORARY_REDIRECT = 307
    PERMANENT_REDIRECT = 308     # RFC 7538

    # 4xx CLIENT ERRORS
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    PAYMENT_REQUIRED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    NOT_ACCEPTABLE = 406
    PROXY_AUTHENTICATION_REQUIRED = 407
    REQUEST_TIMEOUT = 408
    CONFLICT = 409
    GONE = 410
    LENGTH_REQUIRED = 411
    PRECONDITION_FAILED = 412
    PAYLOAD_TOO_LARGE = 413
    URI_TOO_LONG = 414
    UNSUPPORTED_MEDIA_TYPE = 415
    RANGE_NOT_SATISFIABLE = 416
    EXPECTATION_FAILED = 417
    IM_A_TEAPOT = 418                       # RFC 2324
    MISDIRECTED_REQUEST = 421
    UNPROCESSABLE_ENTITY = 422              # RFC 4918
    LOCKED = 423                            # RFC 4918
    FAILED_DEPENDENCY = 424                 # RFC 4918
    TOO_EARLY = 425                         # RFC 8470
    UPGRADE_REQUIRED = 426
    PRECONDITION_REQUIRED = 428             # RFC 6585
    TOO_MANY_REQUESTS = 429                 # RFC 6585
    REQUEST_HEADER_FIELDS_TOO_LARGE = 431   # RFC 6585
    UNAVAILABLE_FOR_LEGAL_REASONS = 451     # RFC 7725

    # 5xx SERVER ERRORS
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    BAD_GATEWAY = 502
    SERVICE_UNAVAILABLE = 503
    GATEWAY_TIMEOUT = 504
    HTTP_VERSION_NOT_SUPPORTED = 505
    VARIANT_ALSO_NEGOTIATES = 506           # RFC 2295
    INSUFFICIENT_STORAGE = 507              # RFC 4918
    LOOP_DETECTED = 508                     # RFC 5842
    NOT_EXTENDED = 510                      # RFC 2774
    NETWORK_AUTHENTICATION_REQUIRED = 511   # RFC 6585

    @property
    def phrase(self) -> str:
        """The English reason phrase for this code."""
        return STATUS_PHRASES[self.value]

    def phrase_in(self, language: Union[Language, str]) -> str:
        """
        The reason phrase for this code in another language.

        Falls back to the English phrase when the language's table has
        no entry for the code.
        """
        return get_phrase(language, self.value, self.phrase)

    @property
    def response_class(self) -> rc.ResponseClass:
        return rc.class_for_code(self.value)

    @property
    def is_informational(self) -> bool:
        return rc.is_informational(self.value)

    @property
    def is_success(self) -> bool:
        return rc.is_successful(self.value)

    @property
    def is_redirect(self) -> bool:
        return rc.is_redirection(self.value)

    @property
    def is_client_error(self) -> bool:
        return rc.is_client_error(self.value)

    @property
    def is_server_error(self) -> bool:
        return rc.is_server_error(self.value)

    @property
    def is_error(self) -> bool:
        """4xx or 5xx. Useful for logging and error handling."""
        return rc.is_error(self.value)
