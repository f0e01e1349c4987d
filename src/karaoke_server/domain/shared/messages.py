"""Centralized message constants for error messages, validation, and user feedback."""

from __future__ import annotations


class ErrorMessages:
    """Error messages for exceptions and validation failures."""

    # Queue Validation Errors
    MISSING_SONG = "Song reference is required"
    MISSING_SINGER = "Singer name is required"
    INVALID_QUEUE_INDEX = "Queue index {index} is out of range (queue has {length} entries)"
    INVALID_QUEUE_MOVE = "Cannot move queue entry from index {from_index} to {to_index}"
    QUEUE_FULL = "Queue is full (max {max_size} entries)"
    QUEUE_ENTRY_NOT_FOUND = "Queue entry not found"

    # Request Errors
    INVALID_BODY = "Invalid request body"
    INVALID_JSON_OBJECT = "Request body must be a JSON object"

    # Media Errors (plain-text bodies)
    VIDEO_NOT_FOUND = "video not found"
    SOUND_NOT_FOUND = "sound not found"
    FILE_TYPE_NOT_ALLOWED = "file type not allowed"

    # Generic
    INTERNAL_ERROR = "Internal server error"

    # Field Validation Errors (templates)
    FIELD_CANNOT_BE_EMPTY = "{field_name} cannot be empty"

    # Settings Validation Errors
    INVALID_LOG_LEVEL = "Invalid log level: {level}. Must be one of {valid_levels}"
    TIMEZONE_REQUIRED = "datetime must be timezone-aware (UTC)"


class LogTemplates:
    """Log message templates for structured logging.

    Use these with logger.info(), logger.error(), etc. and pass values as parameters
    for proper log formatting and structured logging support.
    """

    # Server Lifecycle
    SERVER_STARTING = "Starting karaoke server (environment=%s) on %s:%d"
    SERVER_STOPPED = "Karaoke server stopped"
    SERVER_KEYBOARD_INTERRUPT = "Received keyboard interrupt, shutting down"
    SERVER_FATAL_ERROR = "Fatal error while running server: %s"
    LOGGING_CONFIG_FALLBACK = "Could not load %s, falling back to basic config"

    # Configuration
    MEDIA_ROOT_CHANGED = "%s root changed to %s"
    MEDIA_ROOT_IGNORED = "Ignored invalid %s root candidate: %r"

    # Resolution
    MEDIA_EXACT_HIT = "Resolved %s '%s' to exact file %s"
    MEDIA_PREFIX_HIT = "Resolved %s '%s' by prefix to %s (%d candidates)"
    MEDIA_NOT_FOUND = "No %s file for '%s' under %s"
    MEDIA_ROOT_UNLISTABLE = "Cannot list %s root %s: %s"
    MEDIA_UNSAFE_NAME = "Rejected unsafe %s name %r"

    # Streaming
    STREAM_FULL = "Streaming %s (%d bytes)"
    STREAM_RANGE = "Streaming %s bytes %d-%d/%d"
    STREAM_CLOSED = "Closed stream for %s after %d bytes"

    # Queue Operations
    QUEUE_ENQUEUED = "Queued entry %s for singer %s at position %d"
    QUEUE_REMOVED = "Removed queue entry %s"
    QUEUE_DEQUEUED = "Dequeued entry %s at index %d"
    QUEUE_MOVED = "Moved queue entry from index %d to %d"
    QUEUE_MOVE_REJECTED = "Rejected queue move from index %d to %d (length %d)"
    QUEUE_CLEARED = "Cleared %d entries from queue"

    # HTTP Errors
    HTTP_DOMAIN_ERROR = "%s %s failed: %s"
    HTTP_UNHANDLED_ERROR = "Unhandled error on %s %s"
