"""
Core package for the workforce dashboard application.

Submodules provide the backend gateway client, list filtering, form
validation, CSV export and the Streamlit user interface that are
orchestrated by the top-level `app.py`.
"""
