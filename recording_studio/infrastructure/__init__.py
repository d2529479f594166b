"""
Инфраструктурный слой: реализации портов в памяти.
"""
