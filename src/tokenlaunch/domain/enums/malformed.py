from enum import Enum


class MalformedReason(str, Enum):
    """Why an indexer record was skipped."""

    INVALID_AMOUNT = "InvalidAmount"
    NON_POSITIVE_AMOUNT = "NonPositiveAmount"
    UNKNOWN_TRADE_TYPE = "UnknownTradeType"
    UNDETERMINED_TRADE_TYPE = "UndeterminedTradeType"
    UNKNOWN_CONTRIBUTION_TYPE = "UnknownContributionType"
    INVALID_TIMESTAMP = "InvalidTimestamp"
    MISSING_FIELD = "MissingField"
