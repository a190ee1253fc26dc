"""
period_countdown — обратный отсчёт до границ календарных периодов.

Месяц, квартал, фискальное полугодие, фискальный год (с 1 апреля) и
пользовательские даты в одной фиксированной зоне, плюс число рабочих дней
(без выходных и праздников юрисдикции) до каждой цели.
"""

__version__ = "0.1.0"
