"""Color Translator API: batch translation of color names over HTTP."""
