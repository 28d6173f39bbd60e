"""pomotask core library — timer, task list and the dispatcher that ties them together.

Public API re-exports for convenient imports:
    from pomotask import initial_state, dispatch, render, ...
"""

# Workspace & settings
from pomotask.workspace import (
    workspace_root,
    persist_path,
    config_path,
    log_dir,
    Settings,
    load_settings,
)

# File I/O
from pomotask.fileio import (
    read_text,
    read_json,
    read_yaml,
    write_json_atomic,
)

# Models
from pomotask.models import (
    Mode,
    Focus,
    Task,
    Snapshot,
    TimerState,
    InputCapture,
    RootState,
)

# Persistence
from pomotask.persistence import (
    PersistenceError,
    LoadError,
    SaveError,
    LoadResult,
    SaveResult,
    Persistence,
)

# Events & commands
from pomotask.events import (
    Tick,
    KeyPress,
    Loaded,
    Saved,
    ScheduleTick,
    RunLoad,
    RunSave,
    Quit,
)

# Dispatcher & rendering
from pomotask.dispatcher import dispatch, initial_state, startup_commands
from pomotask.render import render
