# FILE: pages/1_Exports.py
import streamlit as st
from playtime_core.csv_io import export_schedule_csv, roster_to_dataframe
from playtime_core.export_pdf import render_schedule_pdf
from playtime_core.models import Player

st.title("Exports")

roster = [Player(**p) for p in st.session_state.get("roster", [])]
if roster:
    roster_csv = roster_to_dataframe(roster).to_csv(index=False).encode("utf-8")
    st.download_button("Download Roster CSV", data=roster_csv, file_name="roster.csv")

schedule = st.session_state.get("schedule")
if schedule is None:
    st.warning("No schedule generated yet. Generate one on the main page first.")
    st.stop()

st.download_button("Download Rotations CSV", data=export_schedule_csv(schedule), file_name="rotations.csv")

pdf_bytes = render_schedule_pdf(schedule)
st.download_button("Download Printable Schedule (PDF)", data=pdf_bytes, file_name="rotations.pdf", mime="application/pdf")
