"""Static legal text for the services contract and the power of attorney."""

CONTRACT_TITLE = "CONTRATO DE PRESTAÇÃO DE SERVIÇOS"
PARTIES_TITLE = "IDENTIFICAÇÃO DAS PARTES CONTRATADAS"

OBJECT_TITLE = "1 - DO OBJETO DO PRESENTE CONTRATO"
PRICE_TITLE = "2 - PREÇO E FORMA DE PAGAMENTO"

LATE_PAYMENT_CLAUSE = (
    "2.3 O não cumprimento pelo CONTRATANTE das datas e prazos avençados nesta cláusula o "
    "constituirá em mora, independentemente de interpelação da CONTRATADA, nos termos do "
    "artigo 397 do Código Civil. Ainda, acarretará à CONTRATANTE multa equivalente a 2% do "
    "valor total, acrescidos de juros de mora de 3% ao mês, contados a partir do "
    "inadimplemento da obrigação."
)

FEES_CLAUSE = (
    "2.4 Quaisquer taxas, custas, ou acréscimos que surjam em decorrência de alteração da "
    "avença acima, ou de prazos de boletos, ou mesmo de renegociações, serão de "
    "responsabilidade do CONTRATANTE."
)

# (title, body) in the order they appear after the price section.
BOILERPLATE_CLAUSES: tuple[tuple[str, str], ...] = (
    (
        "3 - DAS OBRIGAÇÕES DA CONTRATADA",
        "3.1 Executar os serviços descritos na cláusula primeira com zelo, observando as "
        "normas técnicas da ABNT e da concessionária de energia local.\n"
        "3.2 Fornecer os materiais e equipamentos listados, novos e acompanhados das "
        "respectivas notas fiscais e certificados de garantia dos fabricantes.\n"
        "3.3 Elaborar o projeto elétrico e conduzir o pedido de acesso junto à "
        "concessionária até a aprovação da conexão.",
    ),
    (
        "4 - DAS OBRIGAÇÕES DO CONTRATANTE",
        "4.1 Efetuar os pagamentos nas datas e condições estabelecidas na cláusula segunda.\n"
        "4.2 Permitir o acesso da equipe técnica ao local da instalação em horário "
        "comercial, durante todo o período de execução.\n"
        "4.3 Fornecer os documentos necessários à solicitação de acesso junto à "
        "concessionária, inclusive procuração específica quando exigida.",
    ),
    (
        "5 - DO PRAZO DE EXECUÇÃO",
        "5.1 O prazo de execução começa a contar a partir da confirmação do primeiro "
        "pagamento e da entrega dos equipamentos no local da instalação.\n"
        "5.2 Não são computados no prazo os dias de chuva ou de condições climáticas que "
        "impeçam o trabalho seguro em altura, nem o tempo de análise da concessionária.",
    ),
    (
        "6 - DA GARANTIA",
        "6.1 A CONTRATADA garante os serviços de instalação pelo prazo de 12 (doze) meses "
        "contados da conclusão da obra.\n"
        "6.2 Os equipamentos possuem garantia direta dos fabricantes, nos prazos e "
        "condições por eles estabelecidos, cabendo à CONTRATADA intermediar o acionamento.\n"
        "6.3 A garantia não cobre danos causados por mau uso, intervenção de terceiros, "
        "descargas atmosféricas ou eventos de força maior.",
    ),
    (
        "7 - DA GERAÇÃO DE ENERGIA",
        "7.1 As estimativas de geração apresentadas ao CONTRATANTE são baseadas em médias "
        "históricas de irradiação solar e não constituem garantia de produção mínima, que "
        "varia conforme clima, sombreamento e limpeza dos módulos.",
    ),
    (
        "8 - DA RESCISÃO",
        "8.1 O presente contrato poderá ser rescindido por qualquer das partes em caso de "
        "descumprimento de suas cláusulas, mediante notificação por escrito.\n"
        "8.2 Em caso de desistência do CONTRATANTE após a compra dos equipamentos, os "
        "valores já desembolsados pela CONTRATADA serão retidos a título de ressarcimento.",
    ),
    (
        "9 - DO FORO",
        "9.1 As partes elegem o foro da comarca da CONTRATADA para dirimir quaisquer "
        "dúvidas oriundas do presente contrato, com renúncia expressa a qualquer outro, por "
        "mais privilegiado que seja.\n"
        "E, por estarem assim justas e contratadas, as partes assinam o presente "
        "instrumento em duas vias de igual teor, na presença de duas testemunhas.",
    ),
)

POWER_OF_ATTORNEY_TITLE = "PROCURAÇÃO"

POWER_OF_ATTORNEY_GRANTOR = (
    "OUTORGANTE: {full_name}, {nationality}, inscrito(a) no {document_label} sob o n° {cpf}, "
    "portador(a) do RG n° {rg} {issuing_authority}, residente e domiciliado(a) em {street}, "
    "n° {number}, bairro {neighborhood}, {city}/{state}."
)

POWER_OF_ATTORNEY_GRANTEE = (
    "OUTORGADA: {company_name}, pessoa jurídica de direito privado, inscrita no CNPJ sob o "
    "n° {company_cnpj}, neste ato representada por {representative}, inscrito no CPF sob o "
    "n° {representative_cpf}."
)

POWER_OF_ATTORNEY_POWERS = (
    "PODERES: Pelo presente instrumento, o(a) OUTORGANTE nomeia e constitui a OUTORGADA "
    "sua bastante procuradora para representá-lo(a) perante a concessionária de energia "
    "elétrica {utility_company}, podendo solicitar orçamento de conexão, protocolar pedidos "
    "de acesso, projetos e documentos técnicos, acompanhar vistorias, requerer a troca de "
    "medidor e a adesão ao sistema de compensação de energia elétrica, tudo referente à "
    "unidade consumidora situada em {street}, n° {number}, bairro {neighborhood}, "
    "{city}/{state}, onde será instalado o sistema de microgeração fotovoltaica."
)

POWER_OF_ATTORNEY_VALIDITY = (
    "VALIDADE: Esta procuração é válida por 12 (doze) meses a contar da data de sua "
    "assinatura, sendo vedado o substabelecimento."
)
