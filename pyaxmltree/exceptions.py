class FormatError(Exception):
    """Exception raised when decoding an AXML document fails.

    :param message: description of the failure
    :param offset: absolute offset into the input where decoding failed, if known
    """
    def __init__(self, message, offset=None):
        if offset is not None:
            message = "{} (offset=0x{:08x})".format(message, offset)
        super(FormatError, self).__init__(message)
        self.offset = offset


class TruncatedInputError(FormatError):
    """Exception raised when trying to read beyond available buffer data."""
    pass


class MalformedHeaderError(FormatError):
    """Exception raised when a chunk header violates its size invariants."""
    pass


class HeaderTooSmallError(MalformedHeaderError):
    pass


class ChunkTooSmallError(MalformedHeaderError):
    pass


class ChunkSmallerThanHeaderError(MalformedHeaderError):
    pass


class UnexpectedChunkTypeError(FormatError):
    """Exception raised when a chunk decoder finds a chunk of another type."""
    def __init__(self, expected, actual, offset=None):
        super(UnexpectedChunkTypeError, self).__init__(
            "Expected chunk type 0x{:04x}, got 0x{:04x}".format(expected, actual), offset)
        self.expected = expected
        self.actual = actual


class UnknownChunkTypeError(FormatError):
    """Exception raised when a chunk type tag is not part of the format."""
    def __init__(self, chunk_type, offset=None):
        super(UnknownChunkTypeError, self).__init__(
            "Unknown chunk type 0x{:04x}".format(chunk_type), offset)
        self.chunk_type = chunk_type


class UnknownValueTypeError(FormatError):
    """Exception raised when a typed value has an unknown data type."""
    def __init__(self, value_type, offset=None):
        super(UnknownValueTypeError, self).__init__(
            "Unknown value type 0x{:02x}".format(value_type), offset)
        self.value_type = value_type


class StringIndexOutOfRangeError(FormatError):
    """Exception raised when a string reference has no entry in the string pool."""
    def __init__(self, index, count, offset=None):
        super(StringIndexOutOfRangeError, self).__init__(
            "String index {} out of range, string pool holds {} strings".format(index, count), offset)
        self.index = index
        self.count = count


class UnresolvedNamespaceError(FormatError):
    """Exception raised when an attribute uses a namespace which was never declared."""
    def __init__(self, uri, offset=None):
        super(UnresolvedNamespaceError, self).__init__(
            "No prefix declared for namespace '{}'".format(uri), offset)
        self.uri = uri


class InvalidTextEncodingError(FormatError):
    """Exception raised when string pool data can not be decoded."""
    pass


class UnsupportedStringLengthError(FormatError):
    """Exception raised for strings using the long length encoding (more than 0x7FFF units)."""
    pass


class UnbalancedElementError(FormatError):
    """Exception raised when end tags do not match the open elements."""
    pass


class UnknownResourceIdError(FormatError):
    """Exception raised when a resource id is not a known android attribute."""
    def __init__(self, resource_id):
        super(UnknownResourceIdError, self).__init__(
            "Unknown android attribute resource id 0x{:08x}".format(resource_id))
        self.resource_id = resource_id
