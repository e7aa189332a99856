import logging
import os
import shlex
import tempfile


logger = logging.getLogger("csvgrid.external_editor")


class ExternalEditor:
    """Edits a block of text in $VISUAL / $EDITOR through a temp file."""

    def __init__(self, run_interactive, editor_command=None):
        self._run_interactive = run_interactive
        self.editor_command = editor_command

    def build_argv(self, tmp_path: str) -> list[str]:
        if self.editor_command:
            return list(self.editor_command) + [tmp_path]
        editor = os.environ.get("VISUAL") or os.environ.get("EDITOR") or "vi"
        return shlex.split(editor) + [tmp_path]

    def edit_text(self, text: str) -> str | None:
        """Return the edited text, or None if the editor exited non-zero."""
        tmp = tempfile.NamedTemporaryFile(
            mode="w+", suffix=".csv", delete=False, encoding="utf-8"
        )
        tmp_path = tmp.name
        try:
            tmp.write(text)
            tmp.flush()
        finally:
            tmp.close()

        try:
            rc = self._run_interactive(self.build_argv(tmp_path))
            if rc != 0:
                logger.info("External editor exited with %s; edit discarded", rc)
                return None
            with open(tmp_path, "r", encoding="utf-8") as fh:
                new_text = fh.read()
        finally:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass

        # editors append a final newline
        return new_text.rstrip("\n")
