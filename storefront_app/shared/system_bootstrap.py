# caminho: storefront_app/shared/system_bootstrap.py
# Funções:
# - bootstrap_root_admin(): cria o super_admin inicial quando não existe nenhuma conta
# - seed_sample_data(): popula produtos, serviços de TI e pratos de exemplo em tabelas vazias

from __future__ import annotations

from decimal import Decimal

from pwdlib import PasswordHash

from storefront_app.config import get_settings
from storefront_app.domain.admins.entities import Admin
from storefront_app.domain.admins.enums import ADMIN_ROLE_SUPERUSER
from storefront_app.infrastructure.db.base import SessionLocal
from storefront_app.infrastructure.repositories.admin_repository import AdminRepositoryImpl
from storefront_app.infrastructure.repositories.catalog_repository import (
    FoodItemRepositoryImpl,
    ITServiceRepositoryImpl,
    ProductRepositoryImpl,
    SqlCatalogRepository,
)
from storefront_app.shared.logging import log_info, log_warning

UNSPLASH = 'https://images.unsplash.com/{}?w=500&h=500&fit=crop'

SAMPLE_PRODUCTS = [
    {
        'name': 'Camiseta Premium Negra',
        'description': 'Camiseta 100% algodón de alta calidad',
        'price': Decimal('29.99'),
        'category': 'camisetas',
        'image': UNSPLASH.format('photo-1521572163474-6864f9cf17ab'),
        'featured': True,
    },
    {
        'name': 'Pantalón Casual Azul',
        'description': 'Pantalón de denim premium con ajuste perfecto',
        'price': Decimal('59.99'),
        'category': 'pantalones',
        'image': UNSPLASH.format('photo-1542272604-787c62d465d1'),
    },
    {
        'name': 'Vestido Elegante Blanco',
        'description': 'Vestido casual perfecto para cualquier ocasión',
        'price': Decimal('79.99'),
        'category': 'vestidos',
        'image': UNSPLASH.format('photo-1595607774223-ca3446b912c3'),
        'featured': True,
    },
    {
        'name': 'Mochila Deportiva Negra',
        'description': 'Mochila resistente con compartimientos para laptop',
        'price': Decimal('89.99'),
        'category': 'mochilas',
        'image': UNSPLASH.format('photo-1553062407-98eeb64c6a62'),
        'featured': True,
    },
    {
        'name': 'Laptop ASUS VivoBook 15',
        'description': 'Laptop ligera para trabajo y estudio',
        'price': Decimal('899.99'),
        'category': 'laptops',
        'image': UNSPLASH.format('photo-1496181133206-80ce9b88a853'),
    },
    {
        'name': 'Monitor Samsung 4K 32 pulgadas',
        'description': 'Monitor 4K UHD para diseño y entretenimiento',
        'price': Decimal('599.99'),
        'category': 'monitores',
        'image': UNSPLASH.format('photo-1527443224154-c4a3942d3acf'),
    },
]

SAMPLE_IT_SERVICES = [
    {
        'title': 'Mantenimiento Preventivo',
        'description': 'Mantenimiento regular de tu infraestructura tecnológica para evitar problemas',
        'features': ['Limpieza de equipos', 'Actualizaciones de software', 'Optimización de sistemas', 'Respaldo automático de datos'],
        'icon': 'Wrench',
    },
    {
        'title': 'Venta de Licencias',
        'description': 'Acceso a las mejores licencias de software del mercado con precios competitivos',
        'features': ['Microsoft Office', 'Antivirus profesionales', 'Sistemas operativos', 'Software de productividad'],
        'icon': 'Cpu',
    },
    {
        'title': 'Soporte Técnico 24/7',
        'description': 'Asistencia técnica disponible en cualquier momento del día',
        'features': ['Respuesta inmediata', 'Soporte remoto', 'Ticket de seguimiento', 'Garantía de solución'],
        'icon': 'Headphones',
    },
    {
        'title': 'Instalación de Redes',
        'description': 'Diseño e instalación de redes empresariales de alta velocidad',
        'features': ['Fibra óptica', 'WiFi profesional', 'Seguridad de red', 'Configuración completa'],
        'icon': 'Database',
    },
    {
        'title': 'Seguridad Informática',
        'description': 'Protección contra amenazas cibernéticas y vulnerabilidades',
        'features': ['Análisis de seguridad', 'Firewall avanzado', 'Detección de intrusos', 'Capacitación en seguridad'],
        'icon': 'Shield',
    },
]

SAMPLE_FOOD_ITEMS = [
    {
        'name': 'Desayuno Peruano Tradicional',
        'description': 'Pan casero, queso fresco, jamón serrano y café peruano',
        'price': Decimal('18.50'),
        'category': 'desayunos',
        'image': UNSPLASH.format('photo-1541519227354-08fa5d50c44d'),
    },
    {
        'name': 'Tamales Caseros',
        'description': 'Tamales rellenos de pollo y vegetales, envueltos en hojas de maíz',
        'price': Decimal('12.00'),
        'category': 'desayunos',
        'image': UNSPLASH.format('photo-1607220591413-4ec007e70023'),
    },
    {
        'name': 'Ceviche Mixto Premium',
        'description': 'Ceviche con pescado, camarón y calamar en jugos naturales',
        'price': Decimal('35.00'),
        'category': 'almuerzos',
        'image': UNSPLASH.format('photo-1546069901-ba9599a7e63c'),
    },
    {
        'name': 'Ají de Gallina Criollo',
        'description': 'Pollo desmenuzado en salsa de ají amarillo con papa y huevo',
        'price': Decimal('22.00'),
        'category': 'almuerzos',
        'image': UNSPLASH.format('photo-1546069901-ba9599a7e63c'),
    },
    {
        'name': 'Empanadas Criollas',
        'description': 'Empanadas de harina casera rellenas de carne y huevo',
        'price': Decimal('10.00'),
        'category': 'snacks',
        'image': UNSPLASH.format('photo-1599599810694-b5ac4dd97a2b'),
    },
    {
        'name': 'Chicha Morada',
        'description': 'Bebida tradicional peruana de maíz morado con frutas',
        'price': Decimal('5.00'),
        'category': 'snacks',
        'image': UNSPLASH.format('photo-1544252891-bac62b09b87d'),
    },
]


async def bootstrap_root_admin() -> None:
    """Cria o super_admin padrão (ROOT_AUTH_*) se a tabela de administradores estiver vazia."""
    settings = get_settings()
    email = (settings.ROOT_AUTH_EMAIL or '').strip().lower()
    password = settings.ROOT_AUTH_PASSWORD.get_secret_value().strip()

    if not email or not password:
        log_warning('ROOT_ADMIN_BOOTSTRAP_SKIPPED', {'reason': 'missing_credentials'})
        return

    async with SessionLocal() as session:
        admins = AdminRepositoryImpl(session)
        existing = await admins.count()
        if existing:
            log_info('ROOT_ADMIN_BOOTSTRAP_EXISTS', {'admins': existing})
            return

        created = await admins.add(
            Admin(
                email=email,
                password_hash=PasswordHash.recommended().hash(password),
                role=ADMIN_ROLE_SUPERUSER,
                full_name=settings.ROOT_AUTH_FULL_NAME,
                document_type=settings.ROOT_AUTH_DOCUMENT_TYPE,
                document_number=settings.ROOT_AUTH_DOCUMENT_NUMBER or None,
                recovery_email=email,
            )
        )
        log_info('ROOT_ADMIN_BOOTSTRAP_CREATED', {'admin_id': created.id, 'email': created.email})


async def _seed(repository: SqlCatalogRepository, samples: list[dict], event: str) -> None:
    existing = await repository.count()
    if existing:
        log_info(f'{event}_SKIPPED', {'existing': existing})
        return
    for sample in samples:
        await repository.add(dict(sample))
    log_info(f'{event}_CREATED', {'count': len(samples)})


async def seed_sample_data() -> None:
    async with SessionLocal() as session:
        await _seed(ProductRepositoryImpl(session), SAMPLE_PRODUCTS, 'SAMPLE_PRODUCTS')
        await _seed(ITServiceRepositoryImpl(session), SAMPLE_IT_SERVICES, 'SAMPLE_IT_SERVICES')
        await _seed(FoodItemRepositoryImpl(session), SAMPLE_FOOD_ITEMS, 'SAMPLE_FOOD_ITEMS')
