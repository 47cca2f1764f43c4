"""Message keys and default English templates for the results tree."""

from __future__ import annotations

from typing import Dict


NO_SCAN = "plugin.results.no-scan"
SCAN_NO_RESULTS = "plugin.results.scan-no-results"
SCAN_RESULTS = "plugin.results.scan-results"
SCAN_FILE_RESULT = "plugin.results.scan-file-result"

# Positional placeholders: {0}, {1}, ...
DEFAULT_MESSAGES: Dict[str, str] = {
    NO_SCAN: "No scan has been run yet.",
    SCAN_NO_RESULTS: "The scan found no problems.",
    SCAN_RESULTS: "The scan found {0} problem(s) in {1} file(s).",
    SCAN_FILE_RESULT: "{0} : {1} problem(s)",
}
