from git_cloner.output.renderer import ResultSink, RichResultRenderer

__all__ = ["ResultSink", "RichResultRenderer"]
