# main.py

"""Streamlit web UI for the profanity filter.

Provides a simple interface to submit text and receive a redacted version
along with the word sources that matched it.
"""

import streamlit as st
import logging

from profanity.core.definitions import FilterTarget, ReplacementStrategy
from profanity.core.domain import FilterOptions
from profanity.core.exceptions import ProfanityFilterError
from profanity.logging_config import configure_logging
from profanity.service.config import settings
from profanity.service.pipeline import filter_profanity

configure_logging(settings.log_level)

logger = logging.getLogger(__name__)


def _parse_custom_words(raw: str):
    """Splits a comma or newline separated word list."""
    return [w.strip() for w in raw.replace("\n", ",").split(",") if w.strip()]


def main():
    """Run the Streamlit application UI.

    This function configures the Streamlit page, accepts input text and
    filter options from the user, invokes the filter pipeline, and displays
    the redacted output with the per-source steps.
    """
    st.set_page_config(layout="wide", page_title="Profanity Filter", page_icon="🤬")

    st.title("Profanity Filter")
    st.markdown(
        "Detect and redact profane words using the built-in lexicons and your own word list."
    )
    st.markdown("---")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Input Text")
        text_input = st.text_area(
            "Source Text",
            height=300,
            placeholder="Paste text here...",
        )

        strategies = list(ReplacementStrategy)
        strategy = st.selectbox(
            "Replacement strategy",
            strategies,
            index=strategies.index(settings.default_strategy),
            format_func=lambda s: s.value,
        )
        targets = list(FilterTarget)
        target = st.radio(
            "Target",
            targets,
            index=targets.index(settings.default_target),
            format_func=lambda t: t.value,
            horizontal=True,
        )
        custom_words = st.text_input("Custom words (comma separated)")

    with col2:
        st.subheader("Filtered Output")

        if st.button("Filter", type="primary"):
            if not text_input or not text_input.strip():
                st.warning("Please enter text to process.")
                logger.warning("Filtering attempted with empty input")

            else:
                words = _parse_custom_words(custom_words)
                options = FilterOptions(
                    replacement_strategy=strategy,
                    target=target,
                    additional_sources=(("Custom", words),) if words else (),
                )

                try:
                    result = filter_profanity(text_input, options)

                    st.text_area("Filtered Text", value=result.final_output, height=300)

                    if result.is_filtered:
                        st.success(f"Filtered {len(result.matches)} word(s).")
                    else:
                        st.info("No profanity found.")

                    st.table(
                        [
                            {
                                "Source": step.profane_source_data,
                                "Filtered": step.is_filtered,
                                "Matches": ", ".join(m.value for m in step.matches),
                            }
                            for step in result.steps
                        ]
                    )

                except ProfanityFilterError as e:
                    st.error(f"Filtering failed: {e}")
                    logger.error(
                        "Filtering returned error status",
                        extra={"status": "failed", "text_length": len(text_input)},
                    )

                except Exception:
                    st.error("An unexpected error occurred during filtering.")
                    logger.error(
                        "Unexpected error in main application loop",
                        exc_info=True,
                        extra={"text_length": len(text_input)},
                    )

    with st.sidebar:
        st.header("About")
        st.markdown("""
        Text is checked against each word source in turn:

        - **Built-in lexicons** (English, British, French, German, Italian, Portuguese, Spanish)
        - **Custom words** you supply for this request

        Matching is whole-word and case-insensitive. Once a source redacts a
        word, later sources see the redacted text.
        """)


if __name__ == "__main__":
    main()
