from app.script_panel.panel import CopyIndicator, ScriptPanel, load_script_text

__all__ = ["CopyIndicator", "ScriptPanel", "load_script_text"]
