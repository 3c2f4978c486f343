from enum import Enum


class ErrorCode(Enum):
    CONFIG_MISSING = "FIGMA_TOKEN and FIGMA_FILE_ID must both be set"
    FIGMA_FILE_FETCH_FAILED = "Failed to fetch the Figma file"
    FIGMA_DOCUMENT_MISSING = "Figma response has no document field"
    DESIGN_DOCUMENT_INVALID = "Design document could not be read"
