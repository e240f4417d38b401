"""Validation display component."""

from typing import Optional

import streamlit as st

from ...analysis import ValidationResult
from ...gateway import SubmissionResult


def render_validation(result: ValidationResult, label: str = "Squad") -> None:
    """
    Render validation results.

    Args:
        result: Validation result to display.
        label: What was validated, for the success message.
    """
    if result.is_valid:
        st.success(f"{label} is valid!")
        return

    st.subheader("Issues")
    for violation in result.violations:
        st.error(f"❌ {violation.description}")


def render_submission(result: Optional[SubmissionResult]) -> None:
    """Render the outcome of the last submission, if any."""
    if result is None:
        return
    if result.success:
        st.success("Saved")
    else:
        st.error(f"Save failed: {result.reason}")
