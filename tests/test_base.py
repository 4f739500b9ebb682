from crudempresa.storage import NotFoundError
from crudempresa.views.base import result_text


def test_initial_result_text():
    assert result_text("nenhum") == "Resultado: nenhum"


def test_result_text_wraps_model_message():
    message = "Departamento com ID 1 salvo com sucesso."
    assert result_text(message) == "Resultado: " + message


def test_result_text_of_error_message():
    error = NotFoundError("Erro: não encontrado")
    assert result_text(str(error)).endswith("Erro: não encontrado")
    assert result_text(str(error)).startswith("Resultado: ")