"""
Default action plans.

Used to seed fresh repositories until a real backend supplies them. Each
call returns new model instances so repositories never share state.
"""

from typing import Any, Dict, List

from ..types import ActionPlan

_PLANS: List[Dict[str, Any]] = [
    {
        "id": "ajuste-estoque-001",
        "indicator_id": "uvc",
        "title": "Reduzir ruptura de estoque",
        "description": "Ajuste automatizado de parâmetros de compra para produtos com alta demanda nos últimos 30 dias",
        "steps": [
            "Identificar os 20 produtos com maior venda nos últimos 30 dias",
            "Verificar o estoque atual e ponto de pedido configurado",
            "Ajustar o estoque mínimo para garantir cobertura de 15 dias",
            "Realizar pedidos emergenciais para itens em ruptura",
            "Implementar alerta automático para rupturas potenciais",
        ],
        "products": [
            "Dipirona 500mg - 20 comprimidos",
            "Dorflex - 36 comprimidos",
            "Amoxicilina 500mg - 21 cápsulas",
            "Soro fisiológico 500ml",
            "Loratadina 10mg - 12 comprimidos",
        ],
        "deadline": "7 dias",
        "priority": "high",
        "status": "pending",
    },
    {
        "id": "cross-selling-002",
        "indicator_id": "uvc",
        "title": "Implementar cross-selling",
        "description": "Configure sugestões de produtos complementares para os 20 produtos mais vendidos",
        "steps": [
            "Identificar os 20 produtos com maior venda nos últimos 30 dias",
            "Listar produtos complementares para cada item (ex: Dipirona + Água)",
            "Treinar equipe para sugerir os produtos complementares",
            "Colocar comunicação visual de sugestão próximo aos produtos",
            "Criar combos com desconto para aumentar conversão",
        ],
        "products": [
            "Dipirona 500mg + Água mineral",
            "Protetor solar + Hidratante pós-sol",
            "Shampoo + Condicionador da mesma linha",
            "Medicamentos para pressão + Ômega 3",
            "Escovas de dente + Cremes dentais",
        ],
        "deadline": "15 dias",
        "priority": "medium",
        "status": "pending",
    },
    {
        "id": "pacotes-promo-003",
        "indicator_id": "uvc",
        "title": "Pacotes promocionais",
        "description": "Criar combos para dermocosméticos com baixa conversão, oferecendo desconto na compra conjunta",
        "steps": [
            "Identificar dermocosméticos com baixa conversão e margem interessante",
            "Definir descontos para compras em conjunto (ex: facial + corporal)",
            "Criar material de comunicação visual destacando a promoção",
            "Treinar equipe sobre benefícios dos produtos em conjunto",
            "Montar displays especiais nas áreas de maior circulação da loja",
        ],
        "products": [
            "Hidratante facial + Protetor solar",
            "Shampoo + Condicionador + Máscara",
            "Sérum anti-idade + Creme para os olhos",
            "Sabonete facial + Tônico + Hidratante",
            "Protetor solar corporal + Protetor solar facial",
        ],
        "deadline": "10 dias",
        "priority": "high",
        "status": "in_progress",
    },
    {
        "id": "mix-premium-001",
        "indicator_id": "precoMedio",
        "title": "Ampliar mix premium",
        "description": "Aumentar visibilidade de dermocosméticos e produtos premium nas gôndolas principais",
        "steps": [
            "Realocar produtos premium para áreas de maior visibilidade",
            "Criar ilhas promocionais com produtos de maior valor agregado",
            "Treinar equipe sobre diferenciais dos produtos premium",
            "Implementar materiais de comunicação visual destacando benefícios",
            "Criar experiência de teste para clientes (amostras, demonstrações)",
        ],
        "products": [
            "Linha La Roche-Posay",
            "Linha Vichy",
            "Linha Avène",
            "Suplementos premium",
            "Dermocosméticos anti-idade",
        ],
        "deadline": "7 dias",
        "priority": "high",
        "status": "pending",
    },
    {
        "id": "ajuste-desconto-002",
        "indicator_id": "precoMedio",
        "title": "Revisar política de descontos",
        "description": "Ajustar descontos em produtos com alta elasticidade de preço para otimizar margem",
        "steps": [
            "Identificar produtos com alta elasticidade de preço",
            "Analisar histórico de vendas com diferentes níveis de desconto",
            "Estabelecer limites máximos de desconto por categoria",
            "Criar regras para aprovação de exceções",
            "Treinar equipe sobre nova política",
        ],
        "products": [
            "Medicamentos genéricos de alta concorrência",
            "Produtos de higiene pessoal",
            "Vitaminas e suplementos",
            "Produtos sazonais",
            "Produtos com alta elasticidade de preço",
        ],
        "deadline": "15 dias",
        "priority": "medium",
        "status": "pending",
    },
    {
        "id": "expansao-categorias-003",
        "indicator_id": "precoMedio",
        "title": "Expandir dermocosméticos",
        "description": "Aumentar capilaridade em categorias de maior valor agregado como anti-idade e proteção solar",
        "steps": [
            "Analisar mix atual vs mix ideal de dermocosméticos",
            "Identificar produtos de alto giro e alta margem",
            "Negociar condições especiais com fornecedores",
            "Criar área exclusiva para dermocosméticos",
            "Implementar treinamento especializado para atendentes",
        ],
        "products": [
            "Protetores solares fator 50+",
            "Séruns anti-idade",
            "Produtos para manchas",
            "Hidratantes premium",
            "Produtos para pele sensível",
        ],
        "deadline": "30 dias",
        "priority": "high",
        "status": "pending",
    },
    {
        "id": "mix-continuo-001",
        "indicator_id": "sortimento",
        "title": "Completar mix de uso contínuo",
        "description": "Garantir os medicamentos de uso contínuo mais receitados na região",
        "steps": [
            "Levantar as 50 moléculas de uso contínuo mais receitadas na região",
            "Comparar com o mix atual da loja",
            "Cadastrar e comprar os itens ausentes",
            "Acompanhar a venda dos novos itens por 30 dias",
        ],
        "products": [
            "Losartana 50mg",
            "Metformina 850mg",
            "Sinvastatina 20mg",
            "Levotiroxina 50mcg",
        ],
        "deadline": "15 dias",
        "priority": "high",
        "status": "pending",
    },
    {
        "id": "baixo-giro-002",
        "indicator_id": "sortimento",
        "title": "Substituir itens de baixo giro",
        "description": "Trocar SKUs sem venda há 60 dias por similares de maior demanda",
        "steps": [
            "Listar SKUs sem venda nos últimos 60 dias",
            "Negociar devolução ou troca com fornecedores",
            "Ocupar o espaço liberado com itens de maior demanda",
        ],
        "products": [],
        "deadline": "30 dias",
        "priority": "low",
        "status": "pending",
    },
    {
        "id": "pedido-emergencial-001",
        "indicator_id": "ruptura",
        "title": "Pedido emergencial de itens em falta",
        "description": "Repor os 20 itens com maior perda de venda por falta",
        "steps": [
            "Extrair relatório de demanda não atendida",
            "Selecionar os 20 itens com maior perda",
            "Emitir pedido emergencial ao distribuidor",
            "Confirmar entrega em até 48 horas",
        ],
        "products": [
            "Dipirona 500mg - 20 comprimidos",
            "Amoxicilina 500mg - 21 cápsulas",
            "Soro fisiológico 500ml",
        ],
        "deadline": "2 dias",
        "priority": "high",
        "status": "pending",
    },
    {
        "id": "estoque-minimo-002",
        "indicator_id": "ruptura",
        "title": "Recalcular estoque mínimo",
        "description": "Atualizar ponto de pedido com a demanda dos últimos 30 dias",
        "steps": [
            "Exportar vendas dos últimos 30 dias",
            "Recalcular estoque mínimo para cobertura de 15 dias",
            "Atualizar parâmetros no sistema de compras",
        ],
        "products": [],
        "deadline": "7 dias",
        "priority": "medium",
        "status": "pending",
    },
    {
        "id": "cadastro-programa-001",
        "indicator_id": "adesaoPrograma",
        "title": "Cadastrar clientes crônicos no programa",
        "description": "Oferecer o programa de benefícios no balcão para clientes de uso contínuo",
        "steps": [
            "Treinar equipe sobre os benefícios do programa",
            "Definir meta diária de cadastros por atendente",
            "Acompanhar cadastros semanalmente",
        ],
        "products": [],
        "deadline": "15 dias",
        "priority": "high",
        "status": "pending",
    },
    {
        "id": "lembrete-recompra-002",
        "indicator_id": "adesaoPrograma",
        "title": "Ativar lembrete de recompra",
        "description": "Enviar lembrete de recompra para clientes do programa em tratamento contínuo",
        "steps": [
            "Identificar clientes com tratamento contínuo",
            "Configurar lembrete por SMS ou WhatsApp",
            "Medir retorno dos clientes lembrados",
        ],
        "products": [],
        "deadline": "10 dias",
        "priority": "medium",
        "status": "pending",
    },
]


def default_action_plans() -> List[ActionPlan]:
    return [ActionPlan(**raw) for raw in _PLANS]
