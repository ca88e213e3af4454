"""
Core KUMI functionality: safe JSON persistence, the section catalog,
the wizard state machine, project bootstrap and script dispatch.
"""
