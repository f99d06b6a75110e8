"""User-facing message templates for resource loading"""

from typing import Dict

from textresource.utils.result import FailureKind, FailureReason


class FailureMessages:
    """Message templates shown to the user when a load fails"""

    # Headline per failure kind
    HEADLINES: Dict[FailureKind, str] = {
        FailureKind.NOT_FOUND: "❌ File {name} not found",
        FailureKind.CREATE_FAILED: "❌ Tried to create file {name} but there was a problem: {detail}",
        FailureKind.READ_FAILED: "❌ Error reading file {name}: {detail}",
        FailureKind.OTHER: "❌ There was a problem opening the file {name}: {detail}",
    }

    # Follow-up hint per failure kind
    HINTS: Dict[FailureKind, str] = {
        FailureKind.NOT_FOUND: "💡 Please create {name}, or enable TEXTRESOURCE_CREATE_MISSING",
        FailureKind.CREATE_FAILED: "💡 Please check that the parent directory of {name} exists and is writable",
        FailureKind.READ_FAILED: "💡 Please check read permissions and the TEXTRESOURCE_ENCODING setting",
        FailureKind.OTHER: "💡 Please check that {name} is a regular file",
    }

    @classmethod
    def headline(cls, reason: FailureReason) -> str:
        """
        Get the headline for a failure

        Args:
            reason: Failure to describe

        Returns:
            Formatted headline
        """
        return cls.HEADLINES[reason.kind].format(name=reason.name, detail=reason.detail)

    @classmethod
    def hint(cls, reason: FailureReason) -> str:
        """Get the follow-up hint for a failure"""
        return cls.HINTS[reason.kind].format(name=reason.name, detail=reason.detail)
