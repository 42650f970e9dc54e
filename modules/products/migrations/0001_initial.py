import decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('categories', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='ProductModel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(db_index=True, max_length=200, verbose_name='name')),
                ('sku', models.CharField(db_index=True, max_length=64, unique=True, verbose_name='SKU')),
                ('description', models.TextField(blank=True, default='', verbose_name='description')),
                ('price', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(decimal.Decimal('0'))], verbose_name='price')),
                ('discount_pct', models.DecimalField(blank=True, decimal_places=2, max_digits=5, null=True, validators=[django.core.validators.MinValueValidator(decimal.Decimal('0')), django.core.validators.MaxValueValidator(decimal.Decimal('100'))], verbose_name='discount %')),
                ('stock', models.IntegerField(default=0, validators=[django.core.validators.MinValueValidator(0)], verbose_name='stock')),
                ('is_active', models.BooleanField(db_index=True, default=True, verbose_name='active')),
                ('image_url', models.URLField(blank=True, max_length=500, null=True, verbose_name='image URL')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
                ('deleted_at', models.DateTimeField(blank=True, null=True, verbose_name='deleted at')),
                ('category', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='products', to='categories.categorymodel', verbose_name='category')),
            ],
            options={
                'verbose_name': 'Product',
                'verbose_name_plural': 'Products',
                'db_table': 'products',
                'ordering': ['name'],
                'indexes': [models.Index(fields=['category', 'is_active'], name='products_cat_active_idx')],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('stock__gte', 0)), name='products_stock_non_negative'),
                    models.CheckConstraint(condition=models.Q(('price__gte', 0)), name='products_price_non_negative'),
                    models.CheckConstraint(condition=models.Q(('discount_pct__isnull', True), models.Q(('discount_pct__gte', 0), ('discount_pct__lte', 100)), _connector='OR'), name='products_discount_pct_range'),
                ],
            },
        ),
    ]
