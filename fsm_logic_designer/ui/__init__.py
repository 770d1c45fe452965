# fsm_logic_designer/ui/__init__.py
"""Qt collaborators: drawing adapter and layout animation driver."""
