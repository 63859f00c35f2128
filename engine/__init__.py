"""xeon action script engine.

Modules:
- parser: decodes script lines into command models
- navigator: access to the process working directory
- executor: shared base for the execution modes
- forward: runs scripts in written order
- reverse: undoes scripts with a replay pass and an undo pass
- runner: loads scripts and dispatches on the run mode
- exceptions: engine exception hierarchy
"""
