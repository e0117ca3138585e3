from .loader import CorpusLoader, DocumentEntry, load_document
from .sample_documents import SAMPLE_DOCUMENTS

__all__ = ["CorpusLoader", "DocumentEntry", "load_document", "SAMPLE_DOCUMENTS"]
