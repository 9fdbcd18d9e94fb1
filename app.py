from __future__ import annotations

import json
from dataclasses import asdict

import streamlit as st

from offline_clarifier.pipeline import (
    EXAMPLES,
    ClarifyError,
    ClarifyOptions,
    clarify,
    download_filename,
    result_to_dict,
)
from offline_clarifier.tiers import ComplexityTier, Domain


st.set_page_config(page_title="Clarifier", layout="wide")

st.title("Clarifier")
st.write("Runs locally. Rule-based plain-language rewriting; no model required.")

with st.sidebar:
    st.header("Options")
    domain = st.selectbox("Document type", [d.value for d in Domain], index=len(Domain) - 1)
    tier = st.radio(
        "Reading level",
        [t.value for t in ComplexityTier],
        index=1,
        help="simple: about age 10 / standard: high school / educated: college",
    )

    st.divider()
    st.subheader("Examples")
    for name in EXAMPLES:
        if st.button(f"Load {name} example"):
            st.session_state["input_text"] = EXAMPLES[name]

text = st.text_area("Text to clarify", key="input_text", height=240, max_chars=10_000)
st.caption(f"{len(text or ''):,} / 10,000")

if not st.button("Clarify Text"):
    st.stop()

try:
    result = clarify(text, ClarifyOptions(domain=domain, tier=tier))
except ClarifyError as e:
    st.error(str(e))
    st.stop()

col1, col2 = st.columns(2)

with col1:
    st.subheader("Clarified")
    st.text_area("Output", result.clarified, height=240)

    if result.key_points:
        st.subheader("Key points")
        for point in result.key_points:
            st.markdown(f"- {point}")

with col2:
    st.subheader("Metrics")
    before, after = result.readability_before, result.readability_after

    c1, c2, c3 = st.columns(3)
    with c1:
        st.metric("Original length", f"{result.original_length:,}")
    with c2:
        st.metric("Clarified length", f"{result.clarified_length:,}")
    with c3:
        st.metric("Grade shift", f"{before.grade_level} → {after.grade_level}", delta=after.grade_level - before.grade_level, delta_color="inverse")

    st.caption("Readability (original vs clarified)")
    st.write(
        {
            "original": f"{before.complexity_label} (reading age {before.reading_age})",
            "clarified": f"{after.complexity_label} (reading age {after.reading_age})",
            "reading_time_minutes": result.reading_time_minutes,
            "processing_ms": round(result.processing_ms, 1),
        }
    )

    st.subheader("Downloads")
    st.download_button(
        "Download clarified text",
        data=result.clarified.encode("utf-8"),
        file_name=download_filename(),
    )
    st.download_button(
        "Download analysis (JSON)",
        data=json.dumps(result_to_dict(result), ensure_ascii=False, indent=2).encode("utf-8"),
        file_name="analysis.json",
    )
    with st.expander("Raw metrics"):
        st.json({"before": asdict(before), "after": asdict(after)})
