"""
Планирование сессий в студии звукозаписи.

Пакет содержит доменную модель (комнаты, сессии, музыканты),
прикладной слой и инфраструктурные реализации в памяти.
"""
