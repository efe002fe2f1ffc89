# storefront_app/config/constants.py

# Constantes para a Senha
PASSWORD_LENGTH_MIN = 6
PASSWORD_LENGTH_MAX = 64

# Constantes para Documento de identidade
DOCUMENT_NUMBER_LENGTH_MAX = 32
DNI_LENGTH = 8

# Telefone no formato E.164 "relaxado" (ex.: +51999999999)
PHONE_PATTERN = r'^\+?\d{7,15}$'

# Preço (decimal 10,2)
PRICE_MAX_DIGITS = 10
PRICE_DECIMAL_PLACES = 2

# Valor de filtro de categoria que significa "sem filtro"
CATEGORY_ALL = 'all'

# Identificador do carrinho compartilhado (CART_SCOPE=global)
GLOBAL_CART_ID = 'global'

# Quantidade máxima por linha do carrinho
CART_QUANTITY_MAX = 999
