from app.analysis.analyzer import PlantAnalyzer, extract_text
from app.analysis.factory import AnalyzerFactory

__all__ = ["AnalyzerFactory", "PlantAnalyzer", "extract_text"]
