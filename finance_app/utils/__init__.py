"""
Utilità comuni per l'applicazione
"""
