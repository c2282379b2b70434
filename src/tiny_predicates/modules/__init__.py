"""📦 modules/ — Bounded contexts específicos del negocio

✨ Estado actual:
   • predicates/ → Predicados de comparación, combinadores y check()

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/        → Predicados, combinadores y excepciones
   • application/   → check() y casos de uso
   • infrastructure/→ Observabilidad (logging estructurado, métricas)
   • presentation/  → CLI
"""
