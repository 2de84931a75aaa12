"""Streamlit front end for ReviewSense."""
