from .diagnosis import DiagnosisAnalyzer

__all__ = ["DiagnosisAnalyzer"]
