# src/atlas_rendermime/core/__init__.py
"""
Core do Atlas RenderMime.

Este pacote contém a implementação canônica do motor de renderização
de bundles multi-representação, independente de widgets e de UI.

O core é projetado para ser:
    - determinístico
    - síncrono (nenhuma operação suspende)
    - testável de forma isolada
    - orientado a contratos explícitos

Componentes principais:
    - registry  → tipos, protocolo de Renderer e Registry ordenado
    - engine    → seleção de mimetype e fachada `RenderMime`
    - sanitizer → política de remoção de conteúdo ativo
    - resolver  → resolução de referências relativas
    - config    → carregamento, merge e validação de configuração

Princípios fundamentais:
    - Nenhuma decisão silenciosa: toda falha vira payload de erro e evento
    - Confiança é declarada por chamada, nunca armazenada no bundle
    - Nenhum estado global

Limites explícitos:
    - Não decodifica imagens nem compõe LaTeX
    - Não gerencia DOM, persistência ou comunicação com kernel
"""
