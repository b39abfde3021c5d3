import sys

class ExceptionWithMsg(Exception):
    """ Exception carrying human readable message. """
    message = None # type: str
    def __init__(self, message): # type: (str) -> None
        self.message = message
        super(ExceptionWithMsg, self).__init__(message)

class DecoderError(ExceptionWithMsg):
    """ Raised on error when decoding SMBIOS data. """
    pass

class EntryPointMalformed(DecoderError):
    """ Entry point anchor, length or revision does not match any known
        layout. Fatal, nothing can be decoded. """
    pass

class TruncationFault(DecoderError):
    """ Structure walk would need bytes past the end of the table.
        Structures decoded before the fault are still valid. """
    offset = None # type: int
    def __init__(self, message, offset): # type: (str, int) -> None
        super(TruncationFault, self).__init__(message)
        self.offset = offset

class FieldOutOfRange(DecoderError):
    """ Read outside of the formatted area of a structure. """
    pass

class AcquisitionError(ExceptionWithMsg):
    """ Raised when SMBIOS tables cannot be read from the platform. """
    pass

class Logger(object):
    """ Base logger for use with smbdump.Decoder """
    def info(self, msg): # type: (str) -> None
        """ Harmless deviation: trailing bytes, structure count mismatch. """
        raise NotImplementedError()

    def warning(self, msg): # type: (str) -> None
        """ Decoded data may be incomplete or misinterpreted. """
        raise NotImplementedError()

    def decodererror(self, msg): # type: (str) -> None
        """ Decoding error, not fatal, but firmware explicitly violates
            the standard. Standard logger raises DecoderError(msg)
            but it is safe to just log message and continue decoding.
            Decoder raises DecoderError directly for grave decoding errors."""
        raise NotImplementedError()

class StdErrLogger(Logger):
    """ Basic implementation of smbdump.Logger, that logs to sys.stderr
        and raises DecoderError when decodererror() is called. """
    def _log(self, level, msg): # type: (str, str) -> None
        sys.stderr.write("%s: %s\n" % (level, msg))

    def info(self, msg): # type: (str) -> None
        self._log('Inf', msg)

    def warning(self, msg): # type: (str) -> None
        self._log('Wrn', msg)

    def decodererror(self, msg): # type: (str) -> None
        raise DecoderError(msg)

class LenientLogger(StdErrLogger):
    """ Logger for command line tool, reports violations of the standard
        but keeps decoding. """
    def decodererror(self, msg): # type: (str) -> None
        self._log('Err', msg)
