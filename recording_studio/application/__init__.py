"""
Прикладной слой: сервисы, координирующие доменную модель
и инфраструктуру (репозитории, шину событий, логгер).
"""
