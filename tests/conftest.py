"""Shared test fixtures for the indicator metrics test suite.

Records mix the legacy shape (baselineData / postIAData / info_data) and the
normalized shape (baseline / post_ia_data / improvement_type) on purpose.
"""

import pytest


def make_person(person_id, minutes, rate=10, quantity=1, period="Diário", desired=None, name=None):
    """Helper to build a raw per-person entry with minimal boilerplate."""
    person = {
        "id": person_id,
        "nome": name or f"Pessoa {person_id}",
        "cargo": "Analista",
        "valorHora": rate,
        "tempoGasto": minutes,
        "frequenciaReal": {"quantidade": quantity, "periodo": period},
    }
    if desired is not None:
        person["frequenciaDesejada"] = {"quantidade": desired[0], "periodo": desired[1]}
    return person


@pytest.fixture
def productivity_record() -> dict:
    """One analyst, 60 min -> 30 min once a day at R$10/h."""
    return {
        "id": "ind-prod",
        "info_data": {"nome": "Conciliação bancária", "tipoIndicador": "Produtividade"},
        "baselineData": {
            "tipo": "PRODUTIVIDADE",
            "pessoas": [make_person("p1", 60, desired=(2, "Semanal"), name="Ana")],
        },
        "postIAData": {
            "tipo": "PRODUTIVIDADE",
            "pessoas": [make_person("p1", 30, name="Ana")],
        },
    }


@pytest.fixture
def analytical_capacity_record() -> dict:
    return {
        "id": "ind-cap",
        "name": "Relatórios de crédito",
        "improvement_type": "analytical_capacity",
        "implementation_cost": 24000,
        "baseline": {
            "quantidadeAnalises": 10,
            "periodo": "semana",
            "valorPorAnalise": 200,
            "camposQualitativos": [{"id": "c1", "criterio": "Profundidade", "valor": "Baixa"}],
        },
        "post_ia_data": {
            "quantidadeAnalisesComIA": 25,
            "periodoComIA": "semana",
            "camposQualitativos": [
                {"id": "c1", "criterio": "Profundidade", "valor": "Alta"},
                {"id": "c2", "criterio": "Prazo", "valor": "2 dias"},
            ],
        },
    }


@pytest.fixture
def revenue_record() -> dict:
    return {
        "id": "ind-rev",
        "nome": "Upsell assistido",
        "info_data": {"tipoIndicador": "Incremento Receita"},
        "baselineData": {"valorReceitaAntes": "50000"},
        "postIAData": {"valorReceitaDepois": 65000},
    }


@pytest.fixture
def margin_record() -> dict:
    """Revenue flat at 100k, cost 80k -> 70k, R$50k implementation."""
    return {
        "id": "ind-margin",
        "info_data": {"nome": "Margem do varejo", "tipoIndicador": "Melhoria Margem"},
        "custoImplementacao": 50000,
        "baselineData": {
            "tipo": "MELHORIA MARGEM",
            "receitaBrutaMensal": 100000,
            "custoTotalMensal": 80000,
            "volumeTransacoes": 1200,
        },
        "postIAData": {
            "tipo": "MELHORIA MARGEM",
            "receitaBrutaMensalEstimada": 100000,
            "custoTotalMensalEstimado": 70000,
            "volumeTransacoesEstimado": 1500,
        },
    }


@pytest.fixture
def risk_record() -> dict:
    return {
        "id": "ind-risk",
        "name": "Fraude em pagamentos",
        "improvement_type": "risk_reduction",
        "baseline": {
            "tipoRisco": "Fraude",
            "probabilidadeAtual": 20,
            "impactoFinanceiro": 500000,
            "custoMitigacaoAtual": 10000,
        },
        "postIA": {
            "probabilidadeComIA": 5,
            "impactoFinanceiroReduzido": 400000,
            "custoMitigacaoComIA": 4000,
        },
    }


@pytest.fixture
def decision_quality_record() -> dict:
    return {
        "id": "ind-dec",
        "info_data": {"nome": "Aprovação de crédito", "tipoIndicador": "Qualidade Decisão"},
        "baselineData": {
            "numeroDecisoesPeriodo": 10,
            "periodo": "semana",
            "taxaAcertoAtual": 70,
            "custoMedioDecisaoErrada": 1000,
            "tempoMedioDecisao": 60,
            "pessoasEnvolvidas": 2,
            "valorHoraMedio": 100,
        },
        "postIAData": {
            "numeroDecisoesPeriodoComIA": 10,
            "periodoComIA": "semana",
            "taxaAcertoComIA": 90,
            "custoMedioDecisaoErradaComIA": 1000,
            "tempoMedioDecisaoComIA": 30,
            "pessoasEnvolvidasComIA": 1,
        },
    }


@pytest.fixture
def speed_record() -> dict:
    return {
        "id": "ind-speed",
        "nome": "Entrega de propostas",
        "tipoIndicador": "Velocidade",
        "baselineData": {
            "tempoMedioEntregaAtual": 5,
            "unidadeTempoEntrega": "dias",
            "numeroEntregasPeriodo": 20,
            "periodoEntregas": "mês",
            "custoPorAtraso": 500,
            "pessoasEnvolvidas": 3,
            "tempoTrabalhoPorEntrega": 10,
            "valorHoraMedio": 80,
        },
        "postIAData": {
            "tempoMedioEntregaComIA": 60,
            "unidadeTempoEntregaComIA": "horas",
            "numeroEntregasPeriodoComIA": 30,
            "periodoEntregasComIA": "mês",
            "custoPorAtrasoReduzido": 200,
            "pessoasEnvolvidasComIA": 2,
            "tempoTrabalhoPorEntregaComIA": 8,
        },
    }


@pytest.fixture
def satisfaction_record() -> dict:
    return {
        "id": "ind-sat",
        "info_data": {"nome": "NPS do atendimento", "tipoIndicador": "Satisfação"},
        "baselineData": {
            "tipo": "SATISFAÇÃO",
            "tipoScore": "NPS",
            "scoreAtual": 40,
            "numeroClientes": 1000,
            "valorMedioPorCliente": 100,
            "taxaChurnAtual": 5,
            "ticketMedioSuporte": 300,
        },
        "postIAData": {
            "tipo": "SATISFAÇÃO",
            "scoreComIA": 55,
            "numeroClientesEsperado": 1100,
            "valorMedioPorClienteComIA": 100,
            "taxaChurnComIA": 3,
            "ticketMedioSuporteComIA": 200,
        },
    }


@pytest.fixture
def category_records(
    productivity_record,
    analytical_capacity_record,
    revenue_record,
    margin_record,
    risk_record,
    decision_quality_record,
    speed_record,
    satisfaction_record,
) -> list[dict]:
    """One record per category, in classification priority order."""
    return [
        productivity_record,
        analytical_capacity_record,
        revenue_record,
        margin_record,
        risk_record,
        decision_quality_record,
        speed_record,
        satisfaction_record,
    ]
